"""
Core domain models, multiprecision arithmetic, and contracts.

Этот пакет не зависит от ввода-вывода: арифметика и ряды работают только
над DigitVector в памяти.
"""

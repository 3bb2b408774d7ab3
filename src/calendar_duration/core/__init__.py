"""
Core: календарная арифметика, доменные модели и контракты.

Модуль не зависит от конкретной библиотеки дат: типы дат подключаются
через DateCapability.
"""

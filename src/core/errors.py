"""
Ошибки ядра.

InvalidInput: ошибка вызывающей стороны (невалидные аргументы).
Никогда не ретраится внутри ядра, пробрасывается немедленно.

Пустой результат сканирования ошибкой НЕ является (см. ScanResult.is_empty).
"""


class InvalidInput(ValueError):
    """
    Невалидный вход, переданный в ядро.

    Примеры:
    - reference_price <= 0 или tolerance_fraction < 0 в PriceGate
    - отрицательное число знаков в decimal_candidates сканера
    - variant без обязательных полей
    """

    pass

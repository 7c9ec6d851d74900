"""
Планирование залов кинотеатра.

Отвечает за размещение событий в расписании зала:
- Проверку пересечений с уже запланированными событиями
- Проверку рабочего времени и окна премьер
- Создание сеанса вместе с обязательной уборкой после него
- Построение доски кинотеатра по дням
"""

from .bootstrap import bootstrap_app

__all__ = ["bootstrap_app"]

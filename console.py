"""
console.py

Консольний запуск градієнтного підйому для функцій з реєстру.

За замовчуванням максимізує f (старт (0.2, -2.1), крок 1.0) та
g (старт (0, 0, 0), крок 0.1), виводячи дамп кожної ітерації та підсумок.

Використання:
    ascent-console            # f та g
    ascent-console paraboloid # лише обрані ключі

Рівень логування задається змінною середовища ASCENT_LOG_LEVEL
(DEBUG, INFO, WARNING, ...; за замовчуванням INFO).
"""

from __future__ import annotations

import logging
import os
import sys
from typing import List, Optional

from ascent.errors import AscentError
from ascent.functions import get_function
from ascent.optimizer import run_ascent
from ascent.report import LoggingObserver, format_run

DEFAULT_KEYS = ["f", "g"]

logger = logging.getLogger("ascent.console")


def configure_logging() -> None:
    level_name = os.environ.get("ASCENT_LOG_LEVEL", "INFO").upper()
    level = getattr(logging, level_name, logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(message)s",
        stream=sys.stdout,
    )


def main(argv: Optional[List[str]] = None) -> int:
    configure_logging()

    keys = list(argv if argv is not None else sys.argv[1:]) or DEFAULT_KEYS
    observer = LoggingObserver(logger)

    for key in keys:
        try:
            tf = get_function(key)
            result = run_ascent(
                tf.start_vector(),
                tf.func,
                tf.step_size,
                observer=observer,
            )
        except AscentError as exc:
            logger.error("Помилка для '%s': %s", key, exc)
            return 1

        logger.info("%s\n", format_run(result, title=f"Результат для {tf.name}"))

    return 0


if __name__ == "__main__":
    sys.exit(main())

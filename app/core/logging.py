"""
logging.py

애플리케이션 로그 설정.

- 표준 logging 모듈 사용
- 진입점(app.main, scripts)에서 한 번만 호출
- 각 서비스는 생성자로 logger를 주입받아 사용 (전역 로거 싱글톤 없음)

"""

import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
    )


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(f"tutorlink.{name}")

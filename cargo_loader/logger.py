import logging
from logging.handlers import TimedRotatingFileHandler

FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

def setup_logging(level="INFO", log_file=None):
    root = logging.getLogger("cargo_loader")
    root.setLevel(level)
    root.handlers.clear()
    formatter = logging.Formatter(FORMAT)

    console = logging.StreamHandler()
    console.setFormatter(formatter)
    root.addHandler(console)

    if log_file:
        file_handler = TimedRotatingFileHandler(
            filename=log_file,
            when='midnight',
            interval=1,
            backupCount=7,
            encoding='utf-8'
        )
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
    return root

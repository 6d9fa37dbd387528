import logging

LOG_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"

def configure_logging(level: str = "INFO") -> None:
    """Configure the root logger once; later calls only adjust the level."""
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=level, format=LOG_FORMAT)
    root.setLevel(level)

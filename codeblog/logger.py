import logging
import os
import sys

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'


def setup_logger(level=None, log_file=None):
    # Configurar el logger del paquete
    logger = logging.getLogger("codeblog")
    logger.setLevel(level or os.getenv("LOG_LEVEL", "INFO").upper())

    # Evitar handlers duplicados si se llama más de una vez
    if logger.handlers:
        return logger

    formatter = logging.Formatter(LOG_FORMAT)

    # Salida a consola
    ch = logging.StreamHandler(sys.stdout)
    ch.setFormatter(formatter)
    logger.addHandler(ch)

    # Salida a archivo, solo si se pide
    log_file = log_file or os.getenv("LOG_FILE")
    if log_file:
        fh = logging.FileHandler(log_file, encoding='utf-8')
        fh.setFormatter(formatter)
        logger.addHandler(fh)

    return logger

# Inicializar logger global
logger = setup_logger()

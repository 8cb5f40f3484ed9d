# utils/logger.py
# Configuración simple y reutilizable del logger para todo el proyecto.
# Los handlers (fichero rotativo + consola) y el nivel viven en el logger padre
# "signspeak"; los de cada módulo solo propagan hacia él.
import logging
import logging.handlers
import os

from signspeak import config

ROOT_LOGGER = "signspeak"
DEFAULT_LOG_FILE = "signspeak.log"
DEFAULT_MAX_BYTES = 5 * 1024 * 1024  # 5 MB
DEFAULT_BACKUP_COUNT = 3
LOG_FORMAT = '%(asctime)s [%(levelname)s] %(name)s - %(message)s'


def _configure_root(log_folder, log_file, level):
    root = logging.getLogger(ROOT_LOGGER)
    # evitar añadir handlers múltiples si ya fue configurado
    if root.handlers:
        return root

    os.makedirs(log_folder, exist_ok=True)
    root.setLevel(level)
    formatter = logging.Formatter(LOG_FORMAT, datefmt='%Y-%m-%d %H:%M:%S')

    fh = logging.handlers.RotatingFileHandler(os.path.join(log_folder, log_file),
                                              maxBytes=DEFAULT_MAX_BYTES,
                                              backupCount=DEFAULT_BACKUP_COUNT,
                                              encoding='utf-8')
    fh.setFormatter(formatter)
    root.addHandler(fh)

    ch = logging.StreamHandler()
    ch.setFormatter(formatter)
    root.addHandler(ch)
    return root


def get_logger(name: str, log_folder: str = config.LOG_FOLDER, log_file: str = DEFAULT_LOG_FILE,
               level=logging.INFO):
    """
    Devuelve un logger configurado. Llamar desde otros módulos:
        logger = get_logger(__name__)
    `level` solo se aplica la primera vez, al configurar el logger padre.
    """
    _configure_root(log_folder, log_file, level)
    return logging.getLogger(name)


def set_level(level):
    """Cambia el nivel de todo 'signspeak.*', incluidos loggers creados después (p. ej. --debug)."""
    logging.getLogger(ROOT_LOGGER).setLevel(level)

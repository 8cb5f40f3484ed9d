#src/signspeak/config.py
# config.py
# Configuración global del proyecto (valores por defecto)
import os

CAMERA_INDEX = 0            # índice de la cámara por defecto
FRAME_WIDTH = 640           # ancho de la imagen capturada
FRAME_HEIGHT = 480          # alto de la imagen capturada
TARGET_FPS = 30             # fps objetivo para captura/procesamiento

# MediaPipe Hands (solo se procesa la primera mano)
HANDS_MAX_NUM = 1
HANDS_MODEL_COMPLEXITY = 1
HANDS_MIN_DETECTION_CONFIDENCE = 0.7
HANDS_MIN_TRACKING_CONFIDENCE = 0.5

# Clasificador geométrico
MATCH_THRESHOLD = 0.7       # confianza mínima (estricta) para aceptar un gesto
THUMB_SPREAD = 0.05         # separación horizontal punta-base del pulgar (fracción del ancho)

# Estabilizador temporal
CONFIDENCE_FLOOR = 0.7      # confianza <= a este valor reinicia la racha
STABLE_FRAMES = 5           # frames consecutivos para confirmar un gesto
FRAME_TIMEOUT = 0.5         # segundos sin frames que cuentan como "sin mano"

# Juego / idioma / voz
DEFAULT_LANGUAGE = "en"
SPEECH_RATE = 150           # palabras por minuto (pyttsx3)
POINTS_PER_GESTURE = 10
STREAK_BONUS_EVERY = 5      # cada 5 gestos seguidos se suma un multiplicador

DB_PATH = os.path.join("data", "signspeak.db")   # ruta de la base de datos SQLite
LOG_FOLDER = "logs"

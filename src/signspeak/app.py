#src/signspeak/app.py
# Script de arranque: crea contexto (EventBus, DB, juego, sesión de captura)
# y arranca la GUI principal (MainWindow) o el modo consola.
#
# Uso:
#   python -m signspeak                  # GUI
#   python -m signspeak --lang es
#   python -m signspeak --console        # sin GUI, imprime gestos confirmados
import argparse
import logging
import sys
import time

from signspeak import config
from signspeak.core.events import CAMERA_ERROR, GAME_UPDATE, EventBus
from signspeak.core.session import CaptureSession
from signspeak.games.sentence_game import SentenceGame
from signspeak.patterns import phrases
from signspeak.persistence.db_manager import DBManager
from signspeak.utils.logger import get_logger, set_level

LOGGER = get_logger(__name__)


def build_parser():
    parser = argparse.ArgumentParser(prog="signspeak",
                                     description="SignSpeak: reconoce gestos con la cámara y arma frases.")
    parser.add_argument("--lang", default=config.DEFAULT_LANGUAGE,
                        choices=[l.code for l in phrases.SUPPORTED_LANGUAGES],
                        help="Idioma de la frase y de la voz")
    parser.add_argument("--camera", type=int, default=config.CAMERA_INDEX, help="Índice de la cámara")
    parser.add_argument("--fps", type=int, default=config.TARGET_FPS, help="FPS objetivo de captura")
    parser.add_argument("--user", default=None, help="Usuario para guardar puntos y progreso")
    parser.add_argument("--db", default=config.DB_PATH, help="Ruta de la base de datos SQLite")
    parser.add_argument("--console", action="store_true", help="Modo consola (sin GUI)")
    parser.add_argument("--no-voice", action="store_true", help="Desactiva la narración")
    parser.add_argument("--debug", action="store_true", help="Log a nivel DEBUG")
    return parser


def _make_audio(enabled):
    if not enabled:
        return None
    from signspeak.services.audio_service import AudioService
    try:
        return AudioService()
    except Exception as e:
        LOGGER.warning(f"Voz no disponible ({e}); se continúa sin narración.")
        return None


def run_console(event_bus, game, session):
    """Ejecuta la sesión sin GUI hasta Ctrl+C."""
    def _on_update(state):
        print(f"[{state['points']} XP] {' '.join(state['gestures'])} -> {state['sentence']}")

    event_bus.subscribe(GAME_UPDATE, _on_update)
    event_bus.subscribe(CAMERA_ERROR, lambda msg: print(f"Camera error: {msg}"))
    game.start()
    session.start()
    print("Haz gestos frente a la cámara (Ctrl+C para salir)...")
    try:
        while True:
            time.sleep(0.2)
    except KeyboardInterrupt:
        pass
    finally:
        session.stop()
        text = game.sentence()
        if text:
            print(f"Frase final: {text}")
            game.speak()
            time.sleep(2.0)
        game.stop()


def run(args):
    if args.debug:
        set_level(logging.DEBUG)

    event_bus = EventBus()
    db = DBManager.get_instance(args.db)
    user = {"username": args.user} if args.user else None
    game = SentenceGame(event_bus, db=db, user=user, audio=_make_audio(not args.no_voice),
                        language=args.lang)
    session = CaptureSession(event_bus, camera_src=args.camera, fps=args.fps)

    try:
        if args.console:
            run_console(event_bus, game, session)
        else:
            from signspeak.gui.main_window import MainWindow
            MainWindow(event_bus, game, session).run()
    finally:
        session.stop()
        game.stop()
        db.close()
        LOGGER.info("Salida limpia.")


def main(argv=None):
    args = build_parser().parse_args(argv)
    run(args)
    return 0


if __name__ == "__main__":
    sys.exit(main())

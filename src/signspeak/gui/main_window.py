#src/signspeak/gui/main_window.py
# Interfaz principal usando CustomTkinter.
# Muestra visor de cámara, gesto actual, frase traducida, estadísticas,
# selector de idioma y guía de gestos.
#
# Diseño:
# - La UI NO toca widgets desde hilos secundarios. Los callbacks del EventBus
#   solo guardan el último valor bajo un lock.
# - El loop de Tk usa after() para refrescar preview y etiquetas.
import threading
import time

import cv2
import customtkinter as ctk
from PIL import Image

from signspeak.core.classifier import Gesture
from signspeak.core.events import (
    CAMERA_ERROR, FRAME, GAME_UPDATE, GESTURE_CONFIRMED, GESTURE_DISPLAY, EventBus,
)
from signspeak.core.session import CaptureSession
from signspeak.games.sentence_game import SentenceGame
from signspeak.patterns import phrases
from signspeak.utils.logger import get_logger

LOGGER = get_logger(__name__)

CTK_IMG_SIZE = (480, 360)  # tamaño preview cámara en la GUI
REFRESH_MS = 33
GUIDE_GESTURES = [Gesture.HELLO, Gesture.HI, Gesture.I, Gesture.LOVE, Gesture.YOU]


class MainWindow:
    def __init__(self, event_bus: EventBus, game: SentenceGame, session: CaptureSession):
        self.event_bus = event_bus
        self.game = game
        self.session = session

        # valores compartidos con los hilos (protegidos por _lock)
        self._lock = threading.Lock()
        self._latest_frame = None
        self._display = Gesture.UNKNOWN
        self._state = game.get_state()
        self._pending_console = []

        ctk.set_appearance_mode("System")
        ctk.set_default_color_theme("blue")
        self.root = ctk.CTk()
        self.root.title("SignSpeak - Learn sign language through play!")
        self.root.protocol("WM_DELETE_WINDOW", self._on_close)

        self._build_ui()

        self.event_bus.subscribe(FRAME, self._on_frame_event)
        self.event_bus.subscribe(GESTURE_DISPLAY, self._on_display_event)
        self.event_bus.subscribe(GESTURE_CONFIRMED, self._on_confirmed_event)
        self.event_bus.subscribe(GAME_UPDATE, self._on_game_update)
        self.event_bus.subscribe(CAMERA_ERROR, self._on_camera_error)

        self._refresh_job = None

    # ---------------- UI ----------------
    def _build_ui(self):
        self.root.geometry("1100x760")

        top = ctk.CTkFrame(self.root)
        top.pack(fill="x", padx=12, pady=8)
        ctk.CTkLabel(top, text="🤟 SignSpeak", font=ctk.CTkFont(size=22, weight="bold")).pack(side="left", padx=6)
        self.xp_label = ctk.CTkLabel(top, text="0 XP", font=ctk.CTkFont(size=16, weight="bold"))
        self.xp_label.pack(side="left", padx=12)

        self.btn_stop_cam = ctk.CTkButton(top, text="Stop Camera", command=self.stop_capture, state="disabled")
        self.btn_stop_cam.pack(side="right", padx=6)
        self.btn_start_cam = ctk.CTkButton(top, text="Start Camera", command=self.start_capture)
        self.btn_start_cam.pack(side="right", padx=6)

        middle = ctk.CTkFrame(self.root)
        middle.pack(fill="both", expand=True, padx=12, pady=8)

        # izquierda: cámara + frase
        left = ctk.CTkFrame(middle)
        left.pack(side="left", fill="both", expand=True, padx=(0, 12))
        self._preview = ctk.CTkLabel(left, text="Enable your camera to start", width=CTK_IMG_SIZE[0],
                                     height=CTK_IMG_SIZE[1])
        self._preview.pack(padx=10, pady=6)
        self.detect_label = ctk.CTkLabel(left, text="Show your hand", font=ctk.CTkFont(size=18))
        self.detect_label.pack(pady=(4, 8))

        sentence_box = ctk.CTkFrame(left)
        sentence_box.pack(fill="x", padx=10, pady=6)
        ctk.CTkLabel(sentence_box, text="📝 Sentence Builder", font=ctk.CTkFont(size=16, weight="bold")).pack(anchor="w")
        self.chips_label = ctk.CTkLabel(sentence_box, text="Start making gestures to build a sentence...")
        self.chips_label.pack(anchor="w", pady=4)
        self.sentence_label = ctk.CTkLabel(sentence_box, text="", font=ctk.CTkFont(size=22, weight="bold"))
        self.sentence_label.pack(anchor="w", pady=4)
        buttons = ctk.CTkFrame(sentence_box)
        buttons.pack(anchor="e")
        ctk.CTkButton(buttons, text="🔊 Speak", width=100, command=self.game.speak).pack(side="left", padx=4)
        ctk.CTkButton(buttons, text="Clear", width=100, command=self.game.clear).pack(side="left", padx=4)

        # derecha: estadísticas, idioma, guía, consola
        right = ctk.CTkFrame(middle, width=360)
        right.pack(side="left", fill="y")
        self.stats_label = ctk.CTkLabel(right, text="", font=ctk.CTkFont(size=15))
        self.stats_label.pack(pady=(8, 8))

        names = [f"{l.flag} {l.name}" for l in phrases.SUPPORTED_LANGUAGES]
        self._lang_by_name = {f"{l.flag} {l.name}": l.code for l in phrases.SUPPORTED_LANGUAGES}
        current = phrases.get_language(self.game.language)
        self.lang_menu = ctk.CTkOptionMenu(right, values=names, command=self._on_language_selected)
        self.lang_menu.set(f"{current.flag} {current.name}")
        self.lang_menu.pack(pady=6)

        ctk.CTkLabel(right, text="🤟 Gesture Guide", font=ctk.CTkFont(size=16, weight="bold")).pack(pady=(10, 2))
        self.guide_labels = {}
        for g in GUIDE_GESTURES:
            lbl = ctk.CTkLabel(right, text="", anchor="w", justify="left")
            lbl.pack(fill="x", padx=8)
            self.guide_labels[g] = lbl

        self.console = ctk.CTkTextbox(right, width=340, height=160)
        self.console.pack(padx=8, pady=10)

        self._render_state(self._state)

    # ---------------- EventBus handlers (hilos secundarios) ----------------
    def _on_frame_event(self, frame):
        with self._lock:
            self._latest_frame = frame

    def _on_display_event(self, gesture):
        with self._lock:
            self._display = gesture

    def _on_confirmed_event(self, gesture):
        self._append_console(f"Gesto: {phrases.gesture_label(gesture)}")

    def _on_game_update(self, state):
        with self._lock:
            self._state = state

    def _on_camera_error(self, message):
        self._append_console(f"Camera error: {message}")

    # ---------------- capture control ----------------
    def start_capture(self):
        if self.session.running:
            return
        self.session.start()
        self.game.start()
        self.btn_start_cam.configure(state="disabled")
        self.btn_stop_cam.configure(state="normal")
        self._append_console("Cámara iniciada.")
        self._schedule_refresh()

    def stop_capture(self):
        self.session.stop()
        with self._lock:
            self._latest_frame = None
            self._display = Gesture.UNKNOWN
        self.btn_start_cam.configure(state="normal")
        self.btn_stop_cam.configure(state="disabled")
        self._append_console("Cámara detenida.")

    def _on_language_selected(self, name):
        self.game.set_language(self._lang_by_name.get(name, "en"))

    # ---------------- refresco periódico (hilo de Tk) ----------------
    def _schedule_refresh(self):
        if self._refresh_job is None:
            self._refresh_job = self.root.after(REFRESH_MS, self._refresh)

    def _refresh(self):
        self._refresh_job = None
        with self._lock:
            frame = self._latest_frame
            display = self._display
            state = dict(self._state)
            pending, self._pending_console = self._pending_console, []

        if frame is not None:
            rgb = cv2.cvtColor(frame, cv2.COLOR_BGR2RGB)
            img = Image.fromarray(rgb)
            img.thumbnail(CTK_IMG_SIZE, Image.LANCZOS)
            self._preview.configure(image=ctk.CTkImage(light_image=img, size=img.size), text="")

        if display is Gesture.UNKNOWN:
            self.detect_label.configure(text="Show your hand")
        else:
            self.detect_label.configure(text=f"Hand Detected: {phrases.gesture_label(display)}")

        # la cámara pudo fallar al abrir: reflejar el estado real de la sesión
        running = self.session.running
        self.btn_start_cam.configure(state="disabled" if running else "normal")
        self.btn_stop_cam.configure(state="normal" if running else "disabled")

        self._render_state(state)
        for line in pending:
            self.console.insert(ctk.END, line)
            self.console.see(ctk.END)

        self._schedule_refresh()

    def _render_state(self, state):
        self.xp_label.configure(text=f"{state['points']} XP")
        self.stats_label.configure(text=f"⭐ {state['points']} Points   ⚡ {state['streak']} Streak   "
                                        f"🏆 {state['total_gestures']} Gestures")
        gestures = [Gesture(g) for g in state["gestures"]]
        if gestures:
            self.chips_label.configure(text="  ".join(phrases.gesture_label(g) for g in gestures))
        else:
            self.chips_label.configure(text="Start making gestures to build a sentence...")
        self.sentence_label.configure(text=state["sentence"])
        for g, lbl in self.guide_labels.items():
            mark = "  ✓" if g.value in state["discovered"] else ""
            lbl.configure(text=f"{phrases.GESTURE_EMOJIS[g]} {g.value.capitalize()}: "
                               f"{phrases.GESTURE_INSTRUCTIONS[g]}{mark}")

    # ---------------- console ----------------
    def _append_console(self, text):
        stamp = time.strftime("%H:%M:%S")
        with self._lock:
            self._pending_console.append(f"[{stamp}] {text}\n")

    # ---------------- close ----------------
    def _on_close(self):
        LOGGER.info("Cerrando aplicación...")
        if self._refresh_job:
            self.root.after_cancel(self._refresh_job)
            self._refresh_job = None
        self.session.stop()
        self.game.stop()
        self.event_bus.unsubscribe(FRAME, self._on_frame_event)
        self.event_bus.unsubscribe(GESTURE_DISPLAY, self._on_display_event)
        self.event_bus.unsubscribe(GESTURE_CONFIRMED, self._on_confirmed_event)
        self.event_bus.unsubscribe(GAME_UPDATE, self._on_game_update)
        self.event_bus.unsubscribe(CAMERA_ERROR, self._on_camera_error)
        self.root.destroy()

    def run(self):
        self._schedule_refresh()
        self.root.mainloop()

#src/signspeak/persistence/db_manager.py
# db_manager.py
# Gestor de base de datos SQLite como Singleton.
import os
import sqlite3
import threading

from signspeak import config

_SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS users (
  id INTEGER PRIMARY KEY AUTOINCREMENT,
  username TEXT UNIQUE NOT NULL,
  created_at TEXT DEFAULT CURRENT_TIMESTAMP
);
CREATE TABLE IF NOT EXISTS games (
  id INTEGER PRIMARY KEY AUTOINCREMENT,
  name TEXT NOT NULL UNIQUE
);
CREATE TABLE IF NOT EXISTS scores (
  id INTEGER PRIMARY KEY AUTOINCREMENT,
  user_id INTEGER NOT NULL,
  game_id INTEGER NOT NULL,
  score INTEGER,
  date_played TEXT DEFAULT CURRENT_TIMESTAMP,
  details TEXT,
  FOREIGN KEY(user_id) REFERENCES users(id),
  FOREIGN KEY(game_id) REFERENCES games(id)
);
CREATE TABLE IF NOT EXISTS progress (
  id INTEGER PRIMARY KEY AUTOINCREMENT,
  user_id INTEGER NOT NULL,
  sign TEXT NOT NULL,
  attempts INTEGER DEFAULT 0,
  successes INTEGER DEFAULT 0,
  last_practiced TEXT,
  UNIQUE(user_id, sign),
  FOREIGN KEY(user_id) REFERENCES users(id)
);
"""


class DBManager:
    _instance = None
    _lock = threading.Lock()

    def __new__(cls, db_path=None):
        with cls._lock:
            if cls._instance is None:
                cls._instance = super().__new__(cls)
                cls._instance._initialized = False
        return cls._instance

    @classmethod
    def get_instance(cls, db_path=None):
        return cls(db_path)

    def __init__(self, db_path=None):
        if getattr(self, "_initialized", False):
            return
        self.db_path = db_path or config.DB_PATH
        folder = os.path.dirname(self.db_path)
        if folder and not os.path.exists(folder):
            os.makedirs(folder, exist_ok=True)
        self.conn = sqlite3.connect(self.db_path, check_same_thread=False)
        self.conn.row_factory = sqlite3.Row
        self._write_lock = threading.Lock()
        self._ensure_schema()
        self._initialized = True

    def _ensure_schema(self):
        cur = self.conn.cursor()
        cur.executescript(_SCHEMA_SQL)
        self.conn.commit()

    # Operaciones comunes
    def create_user(self, username):
        with self._write_lock:
            cur = self.conn.cursor()
            try:
                cur.execute("INSERT INTO users(username) VALUES (?)", (username,))
                self.conn.commit()
                return cur.lastrowid
            except sqlite3.IntegrityError:
                # usuario ya existe, devolvemos su id
                cur.execute("SELECT id FROM users WHERE username = ?", (username,))
                row = cur.fetchone()
                return row["id"] if row else None

    def get_user(self, username):
        cur = self.conn.cursor()
        cur.execute("SELECT * FROM users WHERE username = ?", (username,))
        row = cur.fetchone()
        return dict(row) if row else None

    def save_score(self, user_id, game_name, score, details=None):
        with self._write_lock:
            cur = self.conn.cursor()
            # asegurar que el juego existe
            cur.execute("INSERT OR IGNORE INTO games(name) VALUES (?)", (game_name,))
            cur.execute("SELECT id FROM games WHERE name = ?", (game_name,))
            game_id = cur.fetchone()["id"]
            cur.execute("INSERT INTO scores(user_id, game_id, score, details) VALUES (?,?,?,?)",
                        (user_id, game_id, score, details))
            self.conn.commit()
            return cur.lastrowid

    def get_scores(self, user_id):
        cur = self.conn.cursor()
        cur.execute("""SELECT g.name AS game, s.score, s.details, s.date_played
                       FROM scores s JOIN games g ON g.id = s.game_id
                       WHERE s.user_id = ? ORDER BY s.id""", (user_id,))
        return [dict(r) for r in cur.fetchall()]

    def record_sign(self, user_id, sign, success=True):
        """Suma un intento (y un acierto si success) para la seña dada."""
        with self._write_lock:
            cur = self.conn.cursor()
            cur.execute("INSERT OR IGNORE INTO progress(user_id, sign) VALUES (?, ?)", (user_id, sign))
            cur.execute("""UPDATE progress
                           SET attempts = attempts + 1,
                               successes = successes + ?,
                               last_practiced = CURRENT_TIMESTAMP
                           WHERE user_id = ? AND sign = ?""", (1 if success else 0, user_id, sign))
            self.conn.commit()

    def get_progress(self, user_id):
        cur = self.conn.cursor()
        cur.execute("SELECT sign, attempts, successes, last_practiced FROM progress "
                    "WHERE user_id = ? ORDER BY sign", (user_id,))
        return {r["sign"]: dict(r) for r in cur.fetchall()}

    def close(self):
        try:
            self.conn.close()
        finally:
            with DBManager._lock:
                DBManager._instance = None

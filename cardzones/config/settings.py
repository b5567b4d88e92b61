"""
Configuration de l'application (Settings)
=========================================

Rôle
----
- Centraliser les paramètres du service (nom, host/port, chemin du store,
  cookie, politique de mot de passe, admin initial, CORS, niveau de log).
- Les valeurs par défaut conviennent à un environnement de dev local.
- Chaque valeur peut être surchargée via l'environnement ou un fichier `.env`.

Intégrations
------------
- `pydantic-settings` charge automatiquement les variables d'env et `.env`.
- Les services/routers importent `from cardzones.config.settings import settings`.

Exemple de `.env`
-----------------
APP_NAME="Card Zones (staging)"
PORT=8080
DEBUG=false
DATA_DIR="/var/opt/cardzones"
BOOTSTRAP_ADMIN="gm"
LOG_LEVEL="DEBUG"
"""
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List
import os


class Settings(BaseSettings):
    # Nom du service (apparaît dans /health)
    APP_NAME: str = "Card Zones Backend"
    HOST: str = "0.0.0.0"
    PORT: int = 3000

    # True en dev -> cookie de session sans le drapeau `Secure`
    DEBUG: bool = True

    # Document JSON des utilisateurs, du catalogue et des personnages.
    # Par défaut : <repo>/cardzones/data/db.json
    DATA_DIR: str = os.path.join(os.path.dirname(os.path.dirname(__file__)), "data")
    DB_FILENAME: str = "db.json"

    SESSION_COOKIE_NAME: str = "token"
    # Appliquée quand le premier login définit le mot de passe
    MIN_PASSWORD_LENGTH: int = 4

    # Admin créé dans un store vide (sans mot de passe : le premier login le définit)
    BOOTSTRAP_ADMIN: str = "admin"

    ALLOWED_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]

    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    @property
    def db_path(self) -> str:
        return os.path.join(self.DATA_DIR, self.DB_FILENAME)


# Instance unique importable partout : `settings`
settings = Settings()

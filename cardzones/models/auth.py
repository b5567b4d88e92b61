"""
Models / auth.py
Rôle:
- Corps de requête de connexion et profil de l'utilisateur courant.
"""
from pydantic import BaseModel


class LoginIn(BaseModel):
    username: str
    password: str = ""  # vide -> refusé par la politique de longueur au premier login


class UserOut(BaseModel):
    username: str
    role: str


class SuccessOut(BaseModel):
    success: bool = True

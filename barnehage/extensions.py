"""Flask extensions for the application."""
from .store import JsonStore

store = JsonStore()

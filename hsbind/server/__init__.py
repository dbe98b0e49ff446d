"""hsbind FastAPI Server"""
from .app import app

__all__ = ['app']

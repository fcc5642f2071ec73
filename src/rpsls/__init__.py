"""
石头剪刀布蜥蜴斯波克
Rock Paper Scissors Lizard Spock
"""
from .app import Application

__version__ = "0.1.0"

__all__ = ['Application', '__version__']

"""
Simple Pong: player versus a reactive computer paddle
"""

__version__ = "0.1.0"

#!/usr/bin/env python3
"""
Main script to launch Simple Pong with PyGame graphical interface
"""

from simple_pong.gui.game_app import main

if __name__ == "__main__":
    print("=== PONG ===")
    print("Player vs computer")
    print()
    print("CONTROLS:")
    print("  Up/Down arrows: Move your paddle (right side)")
    print("  ESC or close the window: Quit")
    print()
    print("Starting game...")
    print()

    main()

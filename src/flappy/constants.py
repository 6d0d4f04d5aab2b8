"""
constants.py: Centralized default settings for the game world and theme.
"""

# -------- Display Config --------
SCREEN_WIDTH = 400
SCREEN_HEIGHT = 500
RENDER_FPS = 60                 # Target frames per second for the driver loop
WINDOW_TITLE = "Flappy"

# -------- Bird Config --------
BIRD_WIDTH = 35
BIRD_HEIGHT = 30
BIRD_START_X = 80               # Fixed bird X position
BIRD_START_Y = 250
BIRD_EYE_SIZE = 5

# -------- Pipe Config --------
PIPE_WIDTH = 60
PIPE_GAP = 150                  # Vertical opening between top and bottom pipe
PIPE_SPEED = 3                  # Horizontal speed (pixels/frame)
PIPE_SPAWN_INTERVAL = 100       # Spawn every 100 frames
PIPE_MIN_HEIGHT = 50            # Shortest allowed top/bottom pipe

# -------- Physics Config (Pixels / Frame) --------
GRAVITY = 0.5                   # Added to velocity every frame
LIFT = -9.0                     # Velocity set by a flap

# -------- Theme Colors --------
BACKGROUND_COLOR = (112, 197, 206)
BIRD_COLOR = (255, 204, 51)     # #ffcc33
BIRD_EYE_COLOR = (51, 51, 51)   # #333
PIPE_COLOR = (122, 0, 25)       # #7a0019
TEXT_COLOR = (255, 255, 255)
OVERLAY_COLOR = (0, 0, 0, 160)
BUTTON_COLOR = (122, 0, 25)
BUTTON_HOVER_COLOR = (160, 20, 50)

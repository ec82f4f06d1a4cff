WIDTH = 512
HEIGHT = 512
VSYNC = False
# "gl" draws through an OpenGL overlay, "surface" through pygame.draw
RENDERER = "gl"
# Projection: FOV is a linear focal constant, not an angle
FOV = 256
VIEWDISTANCE = 4
# Cube
CUBE_CENTER = (0, 0, 4)
CUBE_SIZE = 2
# Camera
CAMERA_START = (0, 0, -10)
CAMERA_STEP = 1.0  # world units per key press
# Degrees of rotation per pixel of drag
DRAG_SENSITIVITY = 0.5
# Colors (RGB 0-255)
BACKGROUND = (255, 255, 255)
LINE_COLOR = (0, 0, 0)
LINE_WIDTH = 1
HUD_COLOR = (90, 90, 90)
SHOW_HUD = True
# Logging
LOG_LEVEL = "INFO"
LOG_FILE = None
LOG_TIMINGS = False

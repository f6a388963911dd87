"""Global constants for the application."""

# Animation settings
DEFAULT_FPS = 50  # Default frames per second for animation
DEFAULT_MAX_FRAMES = 900  # Frames rendered before the session is cut off
TRAILING_FRAMES = 5  # Frames held after every alien is gone

# Board dimensions in pixels (buffer row 0 is the bottom edge)
BOARD_WIDTH = 224
BOARD_HEIGHT = 256
PLAYFIELD_MARGIN = 1  # Horizontal inset the player may not cross

# Alien grid layout
ALIEN_ROWS = 5
ALIEN_COLUMNS = 11
ALIEN_SPACING_X = 16  # Pixels between column origins
ALIEN_SPACING_Y = 17  # Pixels between row origins
ALIEN_ORIGIN_X = 20
ALIEN_ORIGIN_Y = 128
ALIEN_HIT_POINTS = 1  # Hits needed to destroy an alien
DEATH_TIMER_FRAMES = 10  # Frames a destroyed alien stays visible

# Alien animation (seconds per frame)
ALIEN_FRAME_DURATION = 10 / 60

# Player settings
PLAYER_START_X = BOARD_WIDTH // 2 - 5
PLAYER_START_Y = 32
PLAYER_LIVES = 3
PLAYER_SPEED = 1  # Pixels per frame per unit of move signal (doubled when applied)

# Projectile settings
PROJECTILE_CAPACITY = 128  # Maximum concurrent projectiles
PROJECTILE_SPEED = 2  # Pixels per frame, positive is up
PROJECTILE_FLOOR_Y = 7  # Projectiles below this row are removed

# Colors as (r, g, b)
CLASSIC_BACKGROUND = (0, 128, 0)
CLASSIC_INK = (128, 0, 0)
DARK_BACKGROUND = (13, 17, 23)
DARK_ALIEN = (57, 211, 83)
DARK_DEATH = (255, 166, 87)
DARK_PLAYER = (88, 166, 255)
DARK_PROJECTILE = (255, 255, 255)

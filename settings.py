# settings.py
WIDTH, HEIGHT = 960, 540
TITLE = "Float Runner"
UPDATE_RATE = 1 / 60          # one simulation tick per update

# World (screen coordinates: origin top-left, y grows downward)
GROUND_HEIGHT = 80
GROUND_Y = HEIGHT - GROUND_HEIGHT

# Player
PLAYER_X = 100
PLAYER_SIZE = 40

# Obstacles
OBSTACLE_WIDTH = 25
SECOND_OBSTACLE_OFFSET = 100  # px further right than the first one
SECOND_OBSTACLE_SHRINK = 10   # px shorter than the first one
SECOND_OBSTACLE_CHANCE = 0.3
SPEED_FREQUENCY_FACTOR = 5    # spawn interval tightens by speed * factor

# Coins
COIN_SIZE = 25
COIN_SPIN = 0.1               # radians per tick
COIN_BONUS = 100
COIN_BAND_LOW = 100           # px above the ground
COIN_BAND_SPAN = 100

# Particles
BURST_COUNT = 8
BURST_SPEED = 4.0             # velocity components sampled in [-speed, speed)
PARTICLE_LIFE = 30            # ticks
PARTICLE_GRAVITY = 0.2
PARTICLE_SIZE = 4

# Clouds
CLOUD_COUNT = 5
CLOUD_SPEED = 0.5

# Progression
MAX_SPEED_BONUS = 2
SCORE_PER_SPEED = 1000

# Colors (RGBA)
SKY_TOP = (135, 206, 235, 255)
SKY_BOTTOM = (152, 251, 152, 255)
CLOUD_COLOR = (255, 255, 255, 204)
GROUND = (74, 93, 35, 255)
GRASS = (90, 114, 51, 255)
PLAYER_COLOR = (255, 107, 107, 255)
OBST = (139, 69, 19, 255)
SPIKE = (101, 67, 33, 255)
GOLD = (255, 215, 0, 255)
COIN_SHINE = (255, 248, 220, 255)
WHITE = (220, 220, 220, 255)
PINK = (255, 220, 220, 255)
GRAY = (210, 210, 210, 255)
OVERLAY = (0, 0, 0, 178)

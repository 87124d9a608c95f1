import os

# --- Asset Path ---
ASSET_PATH = os.path.join(os.path.dirname(os.path.abspath(__file__)), "assets")
LOGO_IMAGE = "logo.png"
MAP_IMAGE = "map.png"

# --- Window ---
INITIAL_WIDTH = 1200
INITIAL_HEIGHT = 800
FPS = 60
WINDOW_CAPTION = "Particle Field"

# --- Population ---
MIN_PARTICLES = 40
SPAWN_BURST_SIZE = 3
OFFSCREEN_MARGIN = 150  # Same as the connection threshold

# --- Motion ---
SPEED_PX_PER_SEC = 100
MIN_RADIUS = 1.0
MAX_RADIUS = 3.0

# --- Connections ---
CONNECTION_THRESHOLD = 150
OPACITY_DISTANCE = "distance"
OPACITY_FLAT = "flat"
CONNECTION_OPACITY_MODES = (OPACITY_DISTANCE, OPACITY_FLAT)
CONNECTION_MAX_ALPHA = 255
CONNECTION_FLAT_ALPHA = 40
CONNECTION_WIDTH = 1

# --- Colors ---
BACKGROUND_COLOR = (51, 51, 51)
PARTICLE_COLOR = (255, 255, 255)
CONNECTION_COLOR = (255, 255, 255)


class FieldConfig:
    """Tunable knobs for the particle field. Defaults come from the module constants."""

    def __init__(self,
                 min_particles=MIN_PARTICLES,
                 offscreen_margin=OFFSCREEN_MARGIN,
                 connection_opacity_mode=OPACITY_DISTANCE,
                 speed_px_per_sec=SPEED_PX_PER_SEC,
                 spawn_burst_size=SPAWN_BURST_SIZE,
                 connection_threshold=CONNECTION_THRESHOLD,
                 min_radius=MIN_RADIUS,
                 max_radius=MAX_RADIUS,
                 background_color=BACKGROUND_COLOR,
                 particle_color=PARTICLE_COLOR,
                 connection_color=CONNECTION_COLOR):
        if connection_opacity_mode not in CONNECTION_OPACITY_MODES:
            raise ValueError(f"Unknown connection opacity mode: {connection_opacity_mode!r}")
        if min_particles < 0 or spawn_burst_size < 0:
            raise ValueError("Particle counts must not be negative")
        if offscreen_margin < 0:
            raise ValueError("Offscreen margin must not be negative")
        if connection_threshold <= 0:
            raise ValueError("Connection threshold must be positive")
        if not 0 < min_radius <= max_radius:
            raise ValueError(f"Bad radius range: [{min_radius}, {max_radius}]")

        self.min_particles = min_particles
        self.offscreen_margin = offscreen_margin
        self.connection_opacity_mode = connection_opacity_mode
        self.speed_px_per_sec = speed_px_per_sec
        self.spawn_burst_size = spawn_burst_size
        self.connection_threshold = connection_threshold
        self.min_radius = min_radius
        self.max_radius = max_radius
        self.background_color = background_color
        self.particle_color = particle_color
        self.connection_color = connection_color

    def __repr__(self):
        return (f"FieldConfig(min_particles={self.min_particles}, "
                f"offscreen_margin={self.offscreen_margin}, "
                f"connection_opacity_mode={self.connection_opacity_mode!r}, "
                f"speed_px_per_sec={self.speed_px_per_sec}, "
                f"spawn_burst_size={self.spawn_burst_size})")

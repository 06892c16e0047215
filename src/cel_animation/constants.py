"""Global constants for the application."""

# Timing defaults
DEFAULT_FRAME_RATE = 0.25  # Seconds each frame stays on screen
DEFAULT_ALTERNATE = False  # Play forward only unless asked to ping-pong
INFINITE = "infinite"  # Symbolic iteration count for endless playback
DEFAULT_ITERATIONS = INFINITE

# CSS emission
TIMING_FUNCTION = "steps(1)"  # Hard cut between keyframes, never interpolated
ALTERNATE_DIRECTION = "alternate"
DEFAULT_SELECTOR = ".cel-animation"  # Container whose direct children are the cels
CSS_MARKER = "/* cel-animation */"  # Injection point for existing stylesheets

# Keyframe naming
NAME_PREFIX = "cel"  # Keeps generated identifiers valid CSS idents
NAME_TOKEN_BYTES = 4  # Random bytes mixed into each generator's prefix

# HTML preview
PREVIEW_CEL_SIZE = 96  # Pixel size of placeholder cels
PREVIEW_IMAGE_FORMAT = "webp"

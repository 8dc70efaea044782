LINE_COLOR = "#c9a34b"
POINT_COLOR = "#5aa0ff"
LINE_WIDTH = 1.5

# Screen pixels
POINT_RADIUS = 3

# Fraction of the view the fitted bounds may occupy
FIT_PADDING = 0.9

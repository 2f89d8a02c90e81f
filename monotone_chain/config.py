import os

# Written next to the working directory unless overridden on the command line
SCRIPT_FILE = 'plot_convex_hull.gp'
IMAGE_FILE = 'convex_hull.png'

GNUPLOT = os.environ.get('GNUPLOT', 'gnuplot')

RENDERERS = ('gnuplot', 'matplotlib', 'none')
DEFAULT_RENDERER = 'gnuplot'

LOG_FORMAT = '%(levelname)s: %(message)s'

import collections
import logging
import subprocess

import matplotlib.pyplot

from monotone_chain import config
from monotone_chain.errors import HullError, OutputAccessError
from monotone_chain.points import read_points, read_hull, as_array


logger = logging.getLogger(__name__)

PlotJob = collections.namedtuple('PlotJob', ('script_file', 'input_file', 'hull_file', 'image_file'))


GNUPLOT_TEMPLATE = (
    "set terminal png\n"
    "set output '{image}'\n"
    "plot '{points}' using 1:2 title 'Points' with points pointtype 7, \\\n"
    "     '{hull}' using 1:2 title 'Convex Hull' with linespoints pointtype 5\n"
)


def quote(file_name):
    '''Escape for a single quoted gnuplot string, where '' stands for a quote'''
    return str(file_name).replace("'", "''")


def generate_gnuplot_script(script_file, input_file, hull_file, image_file=config.IMAGE_FILE):
    '''
    Gnuplot script drawing the input points as markers and the hull
    file as a closed line with markers, both from columns 1:2.
    '''
    script = GNUPLOT_TEMPLATE.format(image=quote(image_file), points=quote(input_file),
                                     hull=quote(hull_file))
    try:
        with open(script_file, 'w') as f:
            f.write(script)
    except OSError as e:
        raise OutputAccessError(script_file, e.strerror)
    return script_file


class GnuplotRenderer:
    '''Runs the generated script through gnuplot'''

    NOT_FOUND = 127

    def __init__(self, command=config.GNUPLOT):
        self.command = command

    def render(self, job):
        try:
            status = subprocess.run([self.command, job.script_file]).returncode
        except OSError as e:
            logger.warning('Cannot run %s (%s)', self.command, e.strerror)
            return self.NOT_FOUND
        return status

    __call__ = render


class MatplotlibRenderer:
    '''Draws the same picture as the gnuplot script without gnuplot'''

    def render(self, job):
        try:
            points = as_array(read_points(job.input_file))
            hull = read_hull(job.hull_file)
        except HullError as e:
            logger.warning('Nothing to plot: %s', e)
            return 1
        # Wrap the line back to the first vertex
        hull = as_array(hull + hull[:1])

        fig = matplotlib.pyplot.figure()
        try:
            ax = fig.gca()
            ax.scatter(points[0], points[1], marker='o', label='Points')
            ax.plot(hull[0], hull[1], marker='s', color='red', label='Convex Hull')
            ax.legend()
            fig.savefig(job.image_file)
        except (OSError, ValueError) as e:
            # ValueError for an image extension matplotlib has no writer for
            logger.warning('Cannot save %s (%s)', job.image_file, e)
            return 1
        finally:
            matplotlib.pyplot.close(fig)
        return 0

    __call__ = render


class NullRenderer:
    def render(self, job):
        return 0

    __call__ = render


def get_renderer(name):
    '''Renderer by its command line name'''
    if name == 'gnuplot':
        return GnuplotRenderer()
    if name == 'matplotlib':
        return MatplotlibRenderer()
    if name == 'none':
        return NullRenderer()
    raise ValueError('Unknown renderer {}, expected one of {}'.format(name, ', '.join(config.RENDERERS)))

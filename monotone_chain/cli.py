import argparse
import logging

from monotone_chain import config
from monotone_chain.errors import HullError, OutputAccessError
from monotone_chain.grapher import PlotJob, GnuplotRenderer, generate_gnuplot_script, get_renderer
from monotone_chain.mono_chain import compute_hull, hull_area, encloses
from monotone_chain.points import read_points, write_hull


logger = logging.getLogger(__name__)


def run(input_file, output_file, script_file=config.SCRIPT_FILE, image_file=config.IMAGE_FILE,
        renderer=None):
    '''
    Read points, build the hull, write it, write the gnuplot script and
    render it. Returns the exit status: 1 when the points cannot be read
    or have no hull, 0 otherwise. Output and rendering failures are
    logged but do not change the status.
    '''
    if renderer is None:
        renderer = GnuplotRenderer()

    try:
        points = read_points(input_file)
        hull = compute_hull(points)
    except HullError as e:
        logger.error('%s', e)
        return 1

    if logger.isEnabledFor(logging.DEBUG):
        outside = [p for p in points if not encloses(hull, p)]
        if outside:
            logger.debug('%d points fall outside the hull: %s', len(outside), outside[:10])
        else:
            logger.debug('All %d points lie on or inside the hull', len(points))

    written = write_hull(output_file, hull)
    if written:
        logger.info('Convex hull saved to %s (%d vertices, area %g)',
                    output_file, len(hull), hull_area(hull))

    try:
        generate_gnuplot_script(script_file, input_file, output_file, image_file)
    except OutputAccessError as e:
        logger.warning('%s; skipping visualization', e)
        return 0

    status = renderer(PlotJob(script_file, input_file, output_file, image_file))
    if status != 0:
        logger.warning('Rendering %s exited with status %d', script_file, status)
    elif written:
        logger.info('Visualization saved as %s', image_file)
    else:
        logger.warning('Visualization %s has no hull, %s was not written', image_file, output_file)
    return 0


def prompt(message):
    '''First whitespace delimited token the user types, empty at end of input'''
    try:
        answer = input(message)
    except EOFError:
        return ''
    fields = answer.split()
    return fields[0] if fields else ''


def main(args=None):
    parser = argparse.ArgumentParser(description='Convex hull of integer points by the monotone chain')
    parser.add_argument('input', nargs='?', help='Points file, one "x y" pair per line')
    parser.add_argument('output', nargs='?', help='Where to write the hull')
    parser.add_argument('--script', default=config.SCRIPT_FILE, help='Gnuplot script to generate')
    parser.add_argument('--image', default=config.IMAGE_FILE, help='Image the script renders to')
    parser.add_argument('--renderer', choices=config.RENDERERS, default=config.DEFAULT_RENDERER)
    parser.add_argument('-v', '--verbose', action='store_true')
    parsed_args = parser.parse_args(args)

    logging.basicConfig(level=logging.DEBUG if parsed_args.verbose else logging.INFO,
                        format=config.LOG_FORMAT)

    input_file = parsed_args.input or prompt('Enter the name of the input file: ')
    output_file = parsed_args.output or prompt('Enter the name of the output file: ')

    return run(input_file, output_file,
               script_file=parsed_args.script,
               image_file=parsed_args.image,
               renderer=get_renderer(parsed_args.renderer))

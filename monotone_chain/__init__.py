from monotone_chain.points import Point, read_points, read_hull, write_hull
from monotone_chain.mono_chain import (orientation, compute_hull, hull_area, encloses,
                                       COLLINEAR, CLOCKWISE, COUNTER_CLOCKWISE)
from monotone_chain.grapher import (generate_gnuplot_script, PlotJob,
                                    GnuplotRenderer, MatplotlibRenderer, NullRenderer)
from monotone_chain.cli import run
from monotone_chain.errors import (HullError, AccessError, FormatError, EmptyInputError,
                                   InsufficientPointsError, OutputAccessError)

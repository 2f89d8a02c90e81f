import matplotlib
matplotlib.use('Agg')

import pytest


@pytest.fixture
def write_lines(tmp_path):
    '''Write lines to a file under tmp_path and return its path'''
    def write(lines, name='points.txt'):
        path = tmp_path / name
        path.write_text(''.join(line + '\n' for line in lines), encoding='utf-8')
        return str(path)
    return write


@pytest.fixture
def square_file(write_lines):
    return write_lines(['0 0', '4 0', '4 4', '0 4', '2 2'])

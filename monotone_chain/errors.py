class HullError(Exception):
    '''Base for failures that abort the hull pipeline.'''


class AccessError(HullError):
    '''Points file cannot be opened.'''

    def __init__(self, file_name, reason=None):
        self.file_name = file_name
        message = 'Cannot open file {}'.format(file_name)
        if reason:
            message += ' ({})'.format(reason)
        super().__init__(message)


class FormatError(HullError):
    '''A line of the points file is not two integers.'''

    def __init__(self, file_name, line_number, line):
        self.file_name = file_name
        self.line_number = line_number
        self.line = line
        super().__init__(
            'Invalid data in {}, line {}: {!r}. Each line must contain two integers.'.format(
                file_name, line_number, line))


class EmptyInputError(HullError):
    def __init__(self, file_name):
        self.file_name = file_name
        super().__init__('Input file {} is empty'.format(file_name))


class InsufficientPointsError(HullError):
    def __init__(self, count):
        self.count = count
        super().__init__(
            'At least 3 points are required to compute the convex hull, got {}'.format(count))


class OutputAccessError(HullError):
    '''Destination of a generated file cannot be written.'''

    def __init__(self, file_name, reason=None):
        self.file_name = file_name
        message = 'Cannot write file {}'.format(file_name)
        if reason:
            message += ' ({})'.format(reason)
        super().__init__(message)

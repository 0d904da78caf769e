''' Utilities for parsing data on the command line '''

REV_ARGUMENTS = (
    '--max-count=',
    '--max-age=',
    '--min-age=',
    '--merge-order',
    '--topo-order',
    '--bisect',
    '--no-merges',
)


class RevisionRange:  # pylint: disable=too-few-public-methods
    ''' Parsed revision range.

        `start` is the tip of the range, `end` the excluded bottom. Only the
        first `..` splits, an empty `start` means `head`.
    '''
    def __init__(self, string: str, head: str = 'HEAD'):
        self.input = string
        self.end, delimiter, self.start = string.partition('..')
        self.is_range = bool(delimiter)
        if self.is_range and not self.start:
            self.start = head

    def __repr__(self) -> str:
        return 'RevisionRange(%r)' % self.input


def is_rev_argument(arg: str) -> bool:
    ''' Return true for options which belong to git-rev-list(1) '''
    return arg.startswith(REV_ARGUMENTS)

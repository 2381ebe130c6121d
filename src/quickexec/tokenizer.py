"""Command-line tokenization.

Lines are split on single ASCII spaces only. There is no quoting, escaping
or whitespace trimming: ``"a  b"`` becomes ``["a", "", "b"]`` and an empty
line becomes ``[""]``.
"""


def split_line(line: str) -> list[str]:
    """Split a command line into argument tokens.

    Args:
        line: Raw command line text

    Returns:
        Tokens in order. Never empty: splitting ``""`` yields ``[""]``.

    Example:
        >>> split_line("git --version")
        ['git', '--version']
        >>> split_line(" ls ")
        ['', 'ls', '']
    """
    return line.split(" ")

from typing import Iterable, Iterator


def subject_key(line: str) -> str:
    # The leading <...> token, compared verbatim (not parsed).
    return line.split('>', 1)[0] + '>'


def subject_blocks(lines: Iterable[str]) -> Iterator[str]:
    """
    Group adjacent lines sharing a subject key into blocks of text.

    Input must be sorted by subject; on unsorted input a subject simply shows
    up in more than one block.
    """
    last_subject = None
    block: list[str] = []

    for line in lines:
        line = line.rstrip('\r\n')
        subject = subject_key(line)

        if last_subject is not None and subject != last_subject:
            yield '\n'.join(block)
            block = []

        block.append(line)
        last_subject = subject

    if block:
        yield '\n'.join(block)

"""
Terminal rendering of guess rows and the letter map.

Colour mode paints each letter cell with colorama background colours
(green = '!', yellow = '~', grey = 'x'). Plain mode prints the guess with
the feedback codes on the line underneath, so it also works when output is
piped to a file.

  plain row for guess "arise" against "rebus":

    arise     bcdefgh jklmnopqrstuvwxyz
    x~x~~    x   ~   x        ~~
"""

from __future__ import annotations

from string import ascii_lowercase
from typing import Dict, Iterable, Mapping

from colorama import Back, Fore, Style

from mrdle.engine import ResultCode, encode_feedback

# Gap between the guess and the letter map
PAD = 4

CELL_COLORS: Dict[ResultCode, str] = {
    ResultCode.MATCHED: Back.GREEN,
    ResultCode.MISPLACED: Back.YELLOW,
    ResultCode.ABSENT: Back.LIGHTBLACK_EX,
}


def _cell(ch: str, code: ResultCode, width: int = 3) -> str:
    bg = CELL_COLORS.get(code, "")
    return f"{Fore.WHITE}{bg}{ch:^{width}}{Style.RESET_ALL}"


def render_row(guess: str, feedback: Iterable[ResultCode], *, color: bool = True) -> str:
    feedback = tuple(feedback)
    if color:
        return "".join(_cell(ch, code) for ch, code in zip(guess, feedback))
    return f"{guess}\n{encode_feedback(feedback)}"


def render_letter_map(letter_map: Mapping[str, ResultCode], *, color: bool = True) -> str:
    """
    a..z, one character per letter. Letters known to be absent are blanked;
    in colour mode the other known letters get their state's colour.
    """
    out = []
    for ch in ascii_lowercase:
        code = letter_map.get(ch)
        if code is ResultCode.ABSENT:
            out.append(" ")
        elif code is not None and color:
            out.append(_cell(ch, code, width=1))
        else:
            out.append(ch)
    return "".join(out)


def render_letter_codes(letter_map: Mapping[str, ResultCode]) -> str:
    """The plain-mode second line: the state code under each known letter."""
    return "".join(letter_map[ch].value if ch in letter_map else " " for ch in ascii_lowercase)


def render_turn(guess: str, feedback: Iterable[ResultCode], letter_map: Mapping[str, ResultCode],
                *, color: bool = True) -> str:
    """A guess row with the letter map to its right."""
    feedback = tuple(feedback)
    gap = " " * PAD
    if color:
        return render_row(guess, feedback, color=True) + gap + render_letter_map(letter_map, color=True)
    return (
        f"{guess}{gap}{render_letter_map(letter_map, color=False)}\n"
        f"{encode_feedback(feedback)}{gap}{render_letter_codes(letter_map)}"
    )

from __future__ import annotations

SGR_CODES: dict[str, int] = {
    "normal": 0,
    "bold": 1,
    "dim": 2,
    "ul": 4,
    "reverse": 7,
    "black": 30,
    "red": 31,
    "green": 32,
    "yellow": 33,
    "blue": 34,
    "magenta": 35,
    "cyan": 36,
    "white": 37,
}


class Color:
    @staticmethod
    def format(style: str | list[str], text: str) -> str:
        names = style.split() if isinstance(style, str) else style

        codes: list[int] = []
        foreground = False
        for name in names:
            if name not in SGR_CODES:
                raise ValueError(f"Unknown style name: {name!r}")
            code = SGR_CODES[name]
            # a second colour name sets the background
            if 30 <= code <= 37:
                if foreground:
                    code += 10
                foreground = True
            codes.append(code)

        return f"\x1b[{';'.join(map(str, codes))}m{text}\x1b[0m"

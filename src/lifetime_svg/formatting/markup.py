"""Parser for the inline markup used in lifetime labels."""

from lifetime_svg.formatting.ir import TextBlock, TextStyle


class MarkupParser:
    """Parse label markup into flat styled runs.

    Supported markup: ``*`` bold, ``_`` underline, ``/`` italic and
    `````` code, plus ``\\`` to take the next character literally.

    Delimiters toggle global state rather than opening nested scopes, so
    ``*foo _bar* baz_`` gives three sequential runs: bold ``foo ``,
    bold+underline ``bar`` and underline `` baz``. A style still active when
    the label ends simply stays on for the last run.

    Runs are maximal: a toggle pair with nothing between it (``a**b``) adds
    no empty run, and neighbouring text with the same styles is merged into
    one run, so fewer ``<tspan>`` elements are drawn for the same result.
    """

    ESCAPE = "\\"

    DELIMITERS: dict[str, TextStyle] = {
        "*": TextStyle.BOLD,
        "_": TextStyle.UNDERLINE,
        "/": TextStyle.ITALIC,
        "`": TextStyle.CODE,
    }

    def parse(self, markup: str) -> TextBlock:
        """Convert label markup to a TextBlock.

        Args:
            markup: Raw label text as written after the annotation marker

        Returns:
            TextBlock whose runs appear in left-to-right order of the label
        """
        block = TextBlock()
        style = TextStyle.NONE
        escaped = False
        pending: list[str] = []

        for char in markup:
            if escaped:
                pending.append(char)
                escaped = False
            elif char == self.ESCAPE:
                escaped = True
            elif char in self.DELIMITERS:
                # Close the current run, then flip exactly one toggle
                block.append("".join(pending), style)
                pending = []
                style ^= self.DELIMITERS[char]
            else:
                pending.append(char)

        block.append("".join(pending), style)
        return block

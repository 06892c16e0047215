"""CSS stylesheet output provider."""

from ..constants import CSS_MARKER
from ..declarations import StyleOutput
from .base import OutputProvider


class CssOutputProvider(OutputProvider):
    """Output provider that writes the animation as a plain stylesheet."""

    def encode(self, style: StyleOutput) -> bytes:
        return style.to_css(self.selector).encode("utf-8")

    def write(self, data: bytes) -> None:
        """
        Write the stylesheet, injecting it into an existing file when possible.

        A new file is created with the stylesheet alone. In an existing file the
        line holding the marker comment is replaced; without a marker the
        stylesheet is appended.

        Args:
            data: Stylesheet as bytes (decoded as UTF-8 text)
        """
        if not self.path:
            raise ValueError("Output path not set")
        css = data.decode("utf-8")

        # Create exclusively so an existing file is never clobbered
        try:
            with open(self.path, "x") as f:
                f.write(css)
            return
        except FileExistsError:
            with open(self.path, "r") as f:
                content = f.read()

        if CSS_MARKER in content:
            lines = content.splitlines(keepends=True)
            for i, line in enumerate(lines):
                if CSS_MARKER in line:
                    lines[i] = css
                    break
            content = "".join(lines)
        else:
            if content and not content.endswith("\n"):
                content += "\n"
            content += css

        with open(self.path, "w") as f:
            f.write(content)

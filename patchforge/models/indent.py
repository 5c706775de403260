from dataclasses import dataclass


@dataclass(frozen=True)
class IndentStyle:
    """Indentation unit of a document: `char` repeated `size` times."""

    char: str
    size: int

    @property
    def unit(self) -> str:
        return self.char * self.size

    def describe(self) -> str:
        if self.char == "\t":
            return "tabs"
        return f"{self.size} spaces"

"""Parsers for KEGG flat-file entries."""
from typing import Dict, List

from ..utils.errors import RecordParseError

# Width of the field label column in KEGG flat files
LABEL_WIDTH = 12
END_OF_ENTRY = "///"


def parse_fields(text: str) -> Dict[str, List[str]]:
    """Split a flat-file entry into its fields.

    A line with a label in the first 12 columns starts a field, a line with a
    blank label continues the previous one. Indented sub-labels (such as
    ``  AUTHORS`` under ``REFERENCE``) are fields of their own. Repeated
    labels accumulate their lines.
    """
    fields: Dict[str, List[str]] = {}
    current = None

    for raw in text.splitlines():
        if raw.startswith(END_OF_ENTRY):
            break
        if not raw.strip():
            continue

        label = raw[:LABEL_WIDTH].strip()
        value = raw[LABEL_WIDTH:].strip()
        if label:
            current = label
            fields.setdefault(label, [])
        elif current is None:
            raise RecordParseError("continuation line before the first field")
        if value:
            fields[current].append(value)

    if "ENTRY" not in fields:
        raise RecordParseError("not a KEGG entry: missing ENTRY field")
    return fields


class KEGGEntry:
    """Field access shared by all KEGG entry types."""

    def __init__(self, text: str):
        self.fields = parse_fields(text)

    def lines(self, label: str) -> List[str]:
        return self.fields.get(label, [])

    def field(self, label: str) -> str:
        """All lines of a field joined with single spaces."""
        return " ".join(self.lines(label))

    def id_map(self, label: str) -> Dict[str, str]:
        """Lines of the form ``<id>  <label>`` as an ordered mapping."""
        entries = {}
        for line in self.lines(label):
            parts = line.split(None, 1)
            entries[parts[0]] = parts[1] if len(parts) > 1 else ""
        return entries

    @property
    def entry_id(self) -> str:
        entry = self.field("ENTRY").split()
        return entry[0] if entry else ""

    @property
    def names(self) -> List[str]:
        return [name.rstrip(";").strip() for name in self.lines("NAME")]

    @property
    def name(self) -> str:
        names = self.names
        return names[0] if names else ""

    @property
    def comment(self) -> str:
        return self.field("COMMENT")


class Pathway(KEGGEntry):
    @property
    def name(self) -> str:
        return self.field("NAME")

    @property
    def description(self) -> str:
        return self.field("DESCRIPTION")

    @property
    def pathway_class(self) -> str:
        return self.field("CLASS")

    @property
    def genes(self) -> Dict[str, str]:
        return self.id_map("GENE")

    @property
    def compounds(self) -> Dict[str, str]:
        return self.id_map("COMPOUND")


class Compound(KEGGEntry):
    @property
    def formula(self) -> str:
        return self.field("FORMULA")

    @property
    def mass(self) -> str:
        """Exact mass, falling back to molecular weight."""
        for label in ("EXACT_MASS", "MOL_WEIGHT", "MASS"):
            if self.lines(label):
                return self.field(label)
        return ""

    @property
    def pathways(self) -> Dict[str, str]:
        return self.id_map("PATHWAY")

    @property
    def enzymes(self) -> List[str]:
        return self.field("ENZYME").split()


class Enzyme(KEGGEntry):
    @property
    def enzyme_class(self) -> str:
        return self.field("CLASS")

    @property
    def reaction(self) -> str:
        return self.field("REACTION")

    @property
    def substrates(self) -> List[str]:
        return [s.rstrip(";").strip() for s in self.lines("SUBSTRATE")]

    @property
    def products(self) -> List[str]:
        return [p.rstrip(";").strip() for p in self.lines("PRODUCT")]

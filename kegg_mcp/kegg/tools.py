"""KEGG tools: handlers, input schemas and registration."""
from typing import Any, List, Mapping, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

from .client import KEGGClient
from .records import Compound, Enzyme, Pathway
from ..mcp_models import TextContent, text_block
from ..tool_registry import ToolRegistry
from ..utils.validation import (
    normalize_compound_id,
    normalize_enzyme_id,
    normalize_pathway_id,
)

SAMPLE_GENES = 10
SEARCH_LIMIT = 20
ORGANISM_LIMIT = 50

ArgsModel = TypeVar("ArgsModel", bound=BaseModel)


class PathwayInfoArgs(BaseModel):
    pathway_id: str


class CompoundArgs(BaseModel):
    compound_id: str


class EnzymeInfoArgs(BaseModel):
    enzyme_id: str


class SearchCompoundsArgs(BaseModel):
    query: str
    database: Optional[str] = None


class ListOrganismsArgs(BaseModel):
    filter: Optional[str] = None


def parse_arguments(model: Type[ArgsModel], arguments: Mapping[str, Any]) -> ArgsModel:
    """Validate tool arguments, raising ValueError with a one-line reason."""
    try:
        return model.model_validate(arguments)
    except ValidationError as e:
        problems = []
        for error in e.errors():
            location = ".".join(str(part) for part in error["loc"])
            problems.append(f"{location}: {error['msg']}" if location else error["msg"])
        raise ValueError("invalid arguments (" + "; ".join(problems) + ")") from e


def _id_lines(entries: Mapping[str, str]) -> List[str]:
    return [f"{entry_id}: {label}" for entry_id, label in entries.items()]


class KEGGTools:
    """Tool handlers backed by the KEGG REST API.

    Every handler takes the raw arguments mapping and returns text blocks.
    "Not found" answers are ordinary results; anything else that goes wrong
    is raised and reported by the executor.
    """

    def __init__(self, client: KEGGClient):
        self.client = client

    async def pathway_info(self, arguments: Mapping[str, Any]) -> List[TextContent]:
        args = parse_arguments(PathwayInfoArgs, arguments)
        pathway_id = normalize_pathway_id(args.pathway_id)

        data = await self.client.get_entry(pathway_id)
        if not data:
            return [text_block(f"Pathway not found: {pathway_id}")]

        pathway = Pathway(data)
        genes = pathway.genes
        result = [
            text_block(
                f"KEGG Pathway: {pathway_id}\n"
                f"Name: {pathway.name}\n"
                f"Description: {pathway.description}\n"
                f"Class: {pathway.pathway_class}\n"
                f"Genes: {len(genes)} genes\n"
                f"Compounds: {len(pathway.compounds)} compounds"
            )
        ]

        if genes:
            sample = _id_lines(dict(list(genes.items())[:SAMPLE_GENES]))
            result.append(
                text_block(f"Sample genes (first {SAMPLE_GENES}):\n" + "\n".join(sample))
            )

        return result

    async def compound_info(self, arguments: Mapping[str, Any]) -> List[TextContent]:
        args = parse_arguments(CompoundArgs, arguments)
        compound_id = normalize_compound_id(args.compound_id)

        data = await self.client.get_entry(compound_id)
        if not data:
            return [text_block(f"Compound not found: {compound_id}")]

        compound = Compound(data)
        return [
            text_block(
                f"KEGG Compound: {compound_id}\n"
                f"Name: {compound.name}\n"
                f"Formula: {compound.formula}\n"
                f"Mass: {compound.mass}\n"
                f"Comment: {compound.comment}\n"
                f"Pathways: {len(compound.pathways)} pathways\n"
                f"Enzymes: {len(compound.enzymes)} enzymes"
            )
        ]

    async def enzyme_info(self, arguments: Mapping[str, Any]) -> List[TextContent]:
        args = parse_arguments(EnzymeInfoArgs, arguments)
        enzyme_id = normalize_enzyme_id(args.enzyme_id)

        # Bare EC numbers are not resolvable without the database prefix
        data = await self.client.get_entry(f"ec:{enzyme_id}")
        if not data:
            return [text_block(f"Enzyme not found: {enzyme_id}")]

        enzyme = Enzyme(data)
        return [
            text_block(
                f"KEGG Enzyme: {enzyme_id}\n"
                f"Name: {enzyme.name}\n"
                f"Class: {enzyme.enzyme_class}\n"
                f"Reaction: {enzyme.reaction}\n"
                f"Substrate: {'; '.join(enzyme.substrates)}\n"
                f"Product: {'; '.join(enzyme.products)}\n"
                f"Comment: {enzyme.comment}"
            )
        ]

    async def search_compounds(self, arguments: Mapping[str, Any]) -> List[TextContent]:
        args = parse_arguments(SearchCompoundsArgs, arguments)
        database = args.database or "compound"

        results = await self.client.find_entries(database, args.query)
        if not results:
            return [text_block(f"No compounds found for query: {args.query}")]

        formatted = []
        for line in results.splitlines()[:SEARCH_LIMIT]:
            parts = line.split("\t")
            if len(parts) >= 2:
                formatted.append(f"{parts[0]}: {parts[1]}")

        return [
            text_block(
                f"Search results for '{args.query}' (first {SEARCH_LIMIT}):\n"
                + "\n".join(formatted)
            )
        ]

    async def find_pathways_by_compound(
        self, arguments: Mapping[str, Any]
    ) -> List[TextContent]:
        args = parse_arguments(CompoundArgs, arguments)
        compound_id = normalize_compound_id(args.compound_id)

        data = await self.client.get_entry(compound_id)
        if not data:
            return [text_block(f"Compound not found: {compound_id}")]

        pathways = Compound(data).pathways
        if not pathways:
            return [text_block(f"No pathways found for compound: {compound_id}")]

        return [
            text_block(
                f"Pathways containing compound {compound_id}:\n"
                + "\n".join(_id_lines(pathways))
            )
        ]

    async def list_organisms(self, arguments: Mapping[str, Any]) -> List[TextContent]:
        args = parse_arguments(ListOrganismsArgs, arguments)

        data = await self.client.list_entries("organism")
        if not data:
            return [text_block("No organisms found")]

        organisms = []
        for line in data.splitlines():
            parts = line.split("\t")
            # T-number, code, name, lineage; older listings carry code and name only
            if len(parts) >= 3:
                organisms.append((parts[1], parts[2]))
            elif len(parts) == 2:
                organisms.append((parts[0], parts[1]))

        if args.filter:
            needle = args.filter.lower()
            organisms = [
                (code, name)
                for code, name in organisms
                if needle in name.lower() or needle in code.lower()
            ]

        header = "KEGG Organisms"
        if args.filter:
            header += f" (filtered by '{args.filter}')"
        header += f" (first {ORGANISM_LIMIT}):"

        lines = [f"{code}: {name}" for code, name in organisms[:ORGANISM_LIMIT]]
        return [text_block(header + "\n" + "\n".join(lines))]


def register_kegg_tools(registry: ToolRegistry, tools: KEGGTools) -> None:
    """Register all KEGG tools, in the order ``tools/list`` reports them."""

    # Tool 1: kegg_pathway_info
    registry.register_tool(
        name="kegg_pathway_info",
        description="Get information about a KEGG pathway",
        input_schema={
            "type": "object",
            "properties": {
                "pathway_id": {
                    "type": "string",
                    "description": "KEGG pathway ID (e.g., 'map00010', 'hsa00010')",
                },
            },
            "required": ["pathway_id"],
        },
        handler=tools.pathway_info,
        error_label="Error retrieving pathway info",
    )

    # Tool 2: kegg_compound_info
    registry.register_tool(
        name="kegg_compound_info",
        description="Get information about a KEGG compound",
        input_schema={
            "type": "object",
            "properties": {
                "compound_id": {
                    "type": "string",
                    "description": "KEGG compound ID (e.g., 'C00002', 'cpd:C00002')",
                },
            },
            "required": ["compound_id"],
        },
        handler=tools.compound_info,
        error_label="Error retrieving compound info",
    )

    # Tool 3: kegg_enzyme_info
    registry.register_tool(
        name="kegg_enzyme_info",
        description="Get information about a KEGG enzyme",
        input_schema={
            "type": "object",
            "properties": {
                "enzyme_id": {
                    "type": "string",
                    "description": "KEGG enzyme ID (e.g., 'ec:1.1.1.1')",
                },
            },
            "required": ["enzyme_id"],
        },
        handler=tools.enzyme_info,
        error_label="Error retrieving enzyme info",
    )

    # Tool 4: kegg_search_compounds
    registry.register_tool(
        name="kegg_search_compounds",
        description="Search for KEGG compounds by name or formula",
        input_schema={
            "type": "object",
            "properties": {
                "query": {
                    "type": "string",
                    "description": "Search query (compound name, formula, etc.)",
                },
                "database": {
                    "type": "string",
                    "description": "Database to search (default: 'compound')",
                    "default": "compound",
                },
            },
            "required": ["query"],
        },
        handler=tools.search_compounds,
        error_label="Error searching compounds",
    )

    # Tool 5: kegg_find_pathways_by_compound
    registry.register_tool(
        name="kegg_find_pathways_by_compound",
        description="Find pathways containing a specific compound",
        input_schema={
            "type": "object",
            "properties": {
                "compound_id": {
                    "type": "string",
                    "description": "KEGG compound ID (e.g., 'C00002')",
                },
            },
            "required": ["compound_id"],
        },
        handler=tools.find_pathways_by_compound,
        error_label="Error finding pathways",
    )

    # Tool 6: kegg_list_organisms
    registry.register_tool(
        name="kegg_list_organisms",
        description="List available organisms in KEGG",
        input_schema={
            "type": "object",
            "properties": {
                "filter": {
                    "type": "string",
                    "description": "Optional filter for organism names",
                },
            },
        },
        handler=tools.list_organisms,
        error_label="Error listing organisms",
    )

"""Shared fixtures: KEGG flat-file samples and a stub KEGG client."""
import pytest
from unittest.mock import AsyncMock

from kegg_mcp.kegg.client import KEGGClient

PATHWAY_HSA00010 = """\
ENTRY       hsa00010                    Pathway
NAME        Glycolysis / Gluconeogenesis - Homo sapiens (human)
DESCRIPTION Glycolysis is the process of converting glucose into pyruvate and
            generating small amounts of ATP (energy) and NADH (reducing power).
CLASS       Metabolism; Carbohydrate metabolism
PATHWAY_MAP hsa00010  Glycolysis / Gluconeogenesis
ORGANISM    Homo sapiens (human) [GN:hsa]
GENE        3101  HK3; hexokinase 3 [KO:K00844] [EC:2.7.1.1]
            3098  HK1; hexokinase 1 [KO:K00844] [EC:2.7.1.1]
            3099  HK2; hexokinase 2 [KO:K00844] [EC:2.7.1.1]
            80201  HKDC1; hexokinase domain containing 1 [KO:K00844] [EC:2.7.1.1]
            2645  GCK; glucokinase [KO:K12407] [EC:2.7.1.2]
            2821  GPI; glucose-6-phosphate isomerase [KO:K01810] [EC:5.3.1.9]
            5213  PFKM; phosphofructokinase, muscle [KO:K00850] [EC:2.7.1.11]
            5214  PFKP; phosphofructokinase, platelet [KO:K00850] [EC:2.7.1.11]
            5211  PFKL; phosphofructokinase, liver type [KO:K00850] [EC:2.7.1.11]
            2203  FBP1; fructose-bisphosphatase 1 [KO:K03841] [EC:3.1.3.11]
            8789  FBP2; fructose-bisphosphatase 2 [KO:K03841] [EC:3.1.3.11]
            226  ALDOA; aldolase, fructose-bisphosphate A [KO:K01623] [EC:4.1.2.13]
COMPOUND    C00022  Pyruvate
            C00024  Acetyl-CoA
            C00031  D-Glucose
REFERENCE
  AUTHORS   Nishizuka Y (ed).
  TITLE     [Metabolic Maps] (In Japanese)
///
"""

MAP00010 = """\
ENTRY       map00010                    Pathway
NAME        Glycolysis / Gluconeogenesis
CLASS       Metabolism; Carbohydrate metabolism
COMPOUND    C00022  Pyruvate
///
"""

COMPOUND_C00002 = """\
ENTRY       C00002                      Compound
NAME        ATP;
            Adenosine 5'-triphosphate
FORMULA     C10H16N5O13P3
EXACT_MASS  506.9957
MOL_WEIGHT  507.181
REMARK      Same as: D08646
COMMENT     Energy currency of the cell
ENZYME      1.1.1.1         2.7.1.1         2.7.1.2
            3.6.1.3
PATHWAY     map00190  Oxidative phosphorylation
            map00230  Purine metabolism
            map00970  Aminoacyl-tRNA biosynthesis
DBLINKS     CAS: 56-65-5
///
"""

COMPOUND_WITHOUT_PATHWAYS = """\
ENTRY       C99999                      Compound
NAME        Made-up compound
FORMULA     X2
///
"""

ENZYME_1_1_1_1 = """\
ENTRY       EC 1.1.1.1                  Enzyme
NAME        alcohol dehydrogenase;
            aldehyde reductase;
            ADH
CLASS       Oxidoreductases;
            Acting on the CH-OH group of donors;
            With NAD+ or NADP+ as acceptor
SYSNAME     alcohol:NAD+ oxidoreductase
REACTION    a primary alcohol + NAD+ = an aldehyde + NADH + H+ [RN:R00623]
SUBSTRATE   primary alcohol [CPD:C00226];
            NAD+ [CPD:C00003]
PRODUCT     aldehyde [CPD:C00071];
            NADH [CPD:C00004];
            H+ [CPD:C00080]
COMMENT     A zinc protein.
///
"""

FIND_ATP = (
    "cpd:C00002\tATP; Adenosine 5'-triphosphate\n"
    "cpd:C00008\tADP; Adenosine 5'-diphosphate\n"
    "malformed line without a tab\n"
)

ORGANISM_LIST = (
    "T01001\thsa\tHomo sapiens (human)\tEukaryotes;Animals;Vertebrates;Mammals\n"
    "T01002\tptr\tPan troglodytes (chimpanzee)\tEukaryotes;Animals;Vertebrates;Mammals\n"
    "T00005\tsce\tSaccharomyces cerevisiae (budding yeast)\tEukaryotes;Fungi;Ascomycetes\n"
    "T00007\teco\tEscherichia coli K-12 MG1655\tProkaryotes;Bacteria;Gammaproteobacteria\n"
)


@pytest.fixture
def kegg_client():
    """KEGG client stub answering "not found" to everything by default."""
    client = AsyncMock(spec=KEGGClient)
    client.get_entry.return_value = None
    client.find_entries.return_value = None
    client.list_entries.return_value = None
    return client


@pytest.fixture
def pathway_text():
    return PATHWAY_HSA00010


@pytest.fixture
def reference_pathway_text():
    return MAP00010


@pytest.fixture
def compound_text():
    return COMPOUND_C00002


@pytest.fixture
def bare_compound_text():
    return COMPOUND_WITHOUT_PATHWAYS


@pytest.fixture
def enzyme_text():
    return ENZYME_1_1_1_1


@pytest.fixture
def find_results():
    return FIND_ATP


@pytest.fixture
def organism_list():
    return ORGANISM_LIST

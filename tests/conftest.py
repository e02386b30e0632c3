from typing import List

import pytest

from inscripta.featureloc.feature import Feature, FeatureTable
from inscripta.featureloc.location import Ranged
from inscripta.featureloc.sequence import Sequence

INS_SEQUENCE = (
    "AGCCCTCCAGGACAGGCTGCATCAGAAGAGGCCATCAAGCAGATCACTGTCCTTCTGCCATGGCCCTGTG"
    "GATGCGCCTCCTGCCCCTGCTGGCGCTGCTGGCCCTCTGGGGACCTGACCCAGCCGCAGCCTTTGTGAAC"
    "CAACACCTGTGCGGCTCACACCTGGTGGAAGCTCTCTACCTAGTGTGCGGGGAACGAGGCTTCTTCTACA"
    "CACCCAAGACCCGCCGGGAGGCAGAGGACCTGCAGGTGGGGCAGGTGGAGCTGGGCGGGGGCCCTGGTGC"
    "AGGCAGCCTGCAGCCCTTGGCCCTGGAGGGGTCCCTGCAGAAGCGTGGCATTGTGGAACAATGCTGTACC"
    "AGCATCTGCTCCCTCTACCAGCTGGAGAACTACTGCAACTAGACGCAGCCCGCAGGCAGCCCCACACCCG"
    "CCGCCTCCTGCACCGAGAGAGATGGAATAAAGCCCTTGAACCAGC"
)

INS_SYNONYMS = "IDDM; IDDM1; IDDM2; ILPR; IRDN; MODY10"


def ins_features() -> List[Feature]:
    """Annotation of the human insulin (INS) mRNA, NM_000207"""
    return [
        Feature(
            "source",
            Ranged(0, 465),
            {
                "chromosome": "11",
                "db_xref": "taxon:9606",
                "map": "11p15.5",
                "mol_type": "mRNA",
                "organism": "Homo sapiens",
            },
        ),
        Feature(
            "gene",
            Ranged(0, 465),
            {
                "db_xref": ["GeneID:3630", "HGNC:HGNC:6081", "MIM:176730"],
                "gene": "INS",
                "gene_synonym": INS_SYNONYMS,
                "note": "insulin",
            },
        ),
        Feature(
            "exon",
            Ranged(0, 42),
            {"gene": "INS", "gene_synonym": INS_SYNONYMS, "inference": "alignment:Splign:2.1.0"},
        ),
        Feature(
            "exon",
            Ranged(42, 246),
            {"gene": "INS", "gene_synonym": INS_SYNONYMS, "inference": "alignment:Splign:2.1.0"},
        ),
        Feature(
            "CDS",
            Ranged(59, 392),
            {
                "codon_start": "1",
                "db_xref": ["CCDS:CCDS7729.1", "GeneID:3630", "HGNC:HGNC:6081", "MIM:176730"],
                "gene": "INS",
                "gene_synonym": INS_SYNONYMS,
                "note": "proinsulin; preproinsulin",
                "product": "insulin preproprotein",
                "protein_id": "NP_000198.1",
            },
        ),
        Feature(
            "sig_peptide",
            Ranged(59, 131),
            {
                "gene": "INS",
                "gene_synonym": INS_SYNONYMS,
                "inference": "COORDINATES: ab initio prediction:SignalP:4.0",
            },
        ),
        Feature("proprotein", Ranged(131, 389), {"gene": "INS", "gene_synonym": INS_SYNONYMS, "product": "proinsulin"}),
        Feature(
            "mat_peptide",
            Ranged(131, 221),
            {"gene": "INS", "gene_synonym": INS_SYNONYMS, "product": "insulin B chain"},
        ),
        Feature("mat_peptide", Ranged(227, 320), {"gene": "INS", "gene_synonym": INS_SYNONYMS, "product": "C-peptide"}),
        Feature(
            "mat_peptide",
            Ranged(326, 389),
            {"gene": "INS", "gene_synonym": INS_SYNONYMS, "product": "insulin A chain"},
        ),
        Feature(
            "exon",
            Ranged(246, 465),
            {"gene": "INS", "gene_synonym": INS_SYNONYMS, "inference": "alignment:Splign:2.1.0"},
        ),
    ]


@pytest.fixture
def ins_feature_list() -> List[Feature]:
    return ins_features()


@pytest.fixture
def ins_table() -> FeatureTable:
    return FeatureTable(ins_features())


@pytest.fixture
def ins_sequence() -> Sequence:
    return Sequence(INS_SEQUENCE, id="NM_000207.3")

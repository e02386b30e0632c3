"""
Shared constants for feature keys, qualifier classification and selector syntax.
"""
import re

# Features with this key describe the whole sequence and are kept ahead of every other feature in a table.
SOURCE_KEY = "source"

# INSDC qualifiers whose values are always written inside double quotes.
DEFAULT_QUOTED_QUALIFIERS = frozenset(
    [
        "allele",
        "altitude",
        "bio_material",
        "bound_moiety",
        "cell_line",
        "cell_type",
        "chromosome",
        "clone",
        "clone_lib",
        "collected_by",
        "collection_date",
        "country",
        "cultivar",
        "culture_collection",
        "db_xref",
        "dev_stage",
        "ecotype",
        "EC_number",
        "experiment",
        "function",
        "gene",
        "gene_synonym",
        "haplotype",
        "host",
        "identified_by",
        "inference",
        "isolate",
        "isolation_source",
        "lab_host",
        "lat_lon",
        "locus_tag",
        "map",
        "mol_type",
        "note",
        "old_locus_tag",
        "operon",
        "organelle",
        "organism",
        "plasmid",
        "pop_variant",
        "product",
        "protein_id",
        "pseudogene",
        "regulatory_class",
        "segment",
        "serotype",
        "serovar",
        "sex",
        "standard_name",
        "strain",
        "sub_clone",
        "sub_species",
        "sub_strain",
        "tissue_lib",
        "tissue_type",
        "translation",
        "variety",
    ]
)

# INSDC qualifiers whose values are written bare.
DEFAULT_LITERAL_QUALIFIERS = frozenset(
    [
        "anticodon",
        "citation",
        "codon_start",
        "compare",
        "direction",
        "estimated_length",
        "mod_base",
        "number",
        "rpt_type",
        "rpt_unit_range",
        "tag_peptide",
        "transl_except",
        "transl_table",
    ]
)

# INSDC qualifiers that carry no value at all.
DEFAULT_TOGGLE_QUALIFIERS = frozenset(
    [
        "environmental_sample",
        "focus",
        "germline",
        "macronuclear",
        "partial",
        "proviral",
        "pseudo",
        "rearranged",
        "ribosomal_slippage",
        "transgenic",
        "trans_splicing",
    ]
)

# Character classes accepted by the selector grammar.
SELECTOR_KEY_REGEX = re.compile(r"[A-Za-z0-9_'*-]*")
SELECTOR_QUALIFIER_REGEX = re.compile(r"[A-Za-z0-9_-]+")
SELECTOR_ESCAPE = "\\"
SELECTOR_CLAUSE_DELIMITER = "/"
SELECTOR_VALUE_DELIMITER = "="

# Separates a locator from the modifier resizing its regions.
LOCATOR_RESIZE_DELIMITER = "@"

# Extracts the region of every feature.
DEFAULT_EXTRACT_LOCATOR = "@^..$"

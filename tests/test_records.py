import re

import pytest

from fastajoin import (QUALIFIER, SequenceEntry, canonical_name, extract_accession,
                       extract_annotation, split_records)


def test_split_records_joins_lines_and_drops_delimiter():
    text = ">a1 prot\nAC\r\nGT\n>b2 prot\nTT\n"
    assert split_records(text) == ["a1 protACGT", "b2 protTT"]

def test_split_records_skips_empty_fields():
    assert split_records(">>a\n\n>") == ["a"]
    assert split_records("") == []

def test_extract_accession():
    assert extract_accession("XP_1.1 some protein [Homo sapiens]MK") == "XP_1.1"
    assert extract_accession("   ") == ""

@pytest.mark.parametrize("record, expected", [
    ("a [Homo sapiens]MK", "Homo sapiens"),
    ("a [Homo sapiens] x [strain B]MK", "Homo sapiens] x [strain B"),  # rightmost ']'
    ("a [outer [inner] tail]MK", "outer [inner] tail"),
    ("a no annotation MK", None),
    ("a ]x[ y", None),
    ("a [open only", None),
    ("a []MK", ""),
])
def test_extract_annotation(record, expected):
    assert extract_annotation(record) == expected

@pytest.mark.parametrize("annotation, expected", [
    ("Escherichia coli K-12", "Escherichia coli"),
    ("Escherichia coli", "Escherichia coli"),
    ("Homo sapiens", "Homo sapiens"),
    ("Bacillus subtilis subsp. spizizenii W23", "Bacillus subtilis subsp. spizizenii"),
    ("Mus musculus 2 domesticus", "Mus musculus"),
    ("Mus musculus 23", "Mus musculus 23"),        # only a lone digit stops the scan
    ("Drosophila melanogaster x Drosophila", "Drosophila melanogaster x"),
    ("escherichia", "escherichia"),
    ("Homo  sapiens", "Homo  sapiens"),
    ("", ""),
    (None, ""),
])
def test_canonical_name(annotation, expected):
    assert canonical_name(annotation) == expected

def test_canonical_name_ignores_words_after_qualifier():
    a = canonical_name("Salmonella enterica Typhimurium LT2")
    b = canonical_name("Salmonella enterica 4 whatever trailing words")
    c = canonical_name("Salmonella enterica ATCC 14028 lowercase tail")
    assert a == b == c == "Salmonella enterica"

def test_first_word_is_kept_even_if_it_matches():
    assert canonical_name("7 thing") == "7 thing"
    assert canonical_name("K12 coli Z") == "K12 coli"

def test_custom_stop_pattern():
    # stop on anything containing a dot
    assert canonical_name("Bacillus subtilis subsp. spizizenii", re.compile(r".*\..*")) == "Bacillus subtilis"

def test_qualifier_is_full_word_match():
    assert QUALIFIER.fullmatch("K-12")
    assert QUALIFIER.fullmatch("3")
    assert not QUALIFIER.fullmatch("33")
    assert not QUALIFIER.fullmatch("coli")

def test_sequence_entry_accession():
    e = SequenceEntry("Homo sapiens", "Homo sapiens", "NP_5.2 foo [Homo sapiens]MK", 90.0, "MK")
    assert e.accession == "NP_5.2"

from datasift.ingest.fields import parse_table
from datasift.ingest.shape import is_well_shaped, normalize, spectrum, spectrum_mode
from datasift.schema import Delimiter


def _temperature_table():
    return (
        ("Global Land and Ocean Temperature Anomalies",),
        ("Units: Degrees Celsius",),
        ("Year", "Value"),
        ("1880", "-0.12"),
        ("1881", "-0.07"),
    )


def test_spectrum_preserves_table_order():
    assert spectrum(_temperature_table()) == [1, 1, 2, 2, 2]


def test_spectrum_mode_and_count():
    assert spectrum_mode([1, 1, 2, 2, 2]) == (2, 3)
    assert spectrum_mode([]) is None


def test_spectrum_mode_tie_goes_to_smallest_length():
    assert spectrum_mode([3, 1, 1, 3]) == (1, 2)
    assert spectrum_mode([3, 1, 1, 3]) == spectrum_mode([1, 3, 3, 1])


def test_normalize_splits_metadata_from_clean_table():
    metadata, clean = normalize(_temperature_table())
    assert metadata == ("Global Land and Ocean Temperature Anomalies", "Units: Degrees Celsius")
    assert clean == (("Year", "Value"), ("1880", "-0.12"), ("1881", "-0.07"))
    assert is_well_shaped(clean)


def test_normalize_is_idempotent():
    _, clean = normalize(_temperature_table())
    metadata, again = normalize(clean)
    assert again == clean
    assert metadata == ()


def test_normalize_empty_table():
    assert normalize(()) == ((), ())


def test_space_separated_metadata_is_rejoined():
    table = parse_table("Monthly temperature data\nx y\n1 2\n3 4", Delimiter.SPACE)
    metadata, clean = normalize(table)
    assert metadata == ("Monthly temperature data",)
    assert len(clean) == 3


def test_trailing_malformed_record_shifts_metadata_window():
    # Good data is assumed to run to the end; a late stray line pulls the
    # header row into the metadata window while the clean table stays right.
    table = (("t",), ("a", "b"), ("1", "2"), ("3", "4"), ("x",))
    metadata, clean = normalize(table)
    assert metadata == ("t", "a b")
    assert clean == (("a", "b"), ("1", "2"), ("3", "4"))


def test_is_well_shaped():
    assert not is_well_shaped(_temperature_table())
    assert is_well_shaped((("1", "2"), ("3", "4")))

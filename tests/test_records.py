import logging

from solar_lookup.records import address_from_row, build_dataset, record_from_row


def test_build_dataset_normalizes_keys(dataset):
    assert list(dataset) == ["hoofdstraat 12", "kerkweg 6b", "lange nieuwstraat 101"]


def test_record_from_row_reads_spreadsheet_headers(dataset):
    record = dataset["hoofdstraat 12"]

    assert record.panels == 20
    assert record.confidence_level == 8
    assert record.kwp == 8
    assert record.capacity == 8
    assert record.kwh_per_kwp_per_year == 950
    assert record.availability_factor == 0.9
    assert record.installation_date is None


def test_record_from_row_keeps_zero(dataset):
    assert dataset["lange nieuwstraat 101"].panels == 0


def test_record_from_row_skips_blank_cells():
    record = record_from_row({"Number of solar panels": "", "Panels": 14, "kwhPerKwpPerYear": 900})

    assert record.panels == 14
    assert record.kwh_per_kwp_per_year == 900


def test_record_from_row_legacy_capacity():
    record = record_from_row({"Total Capacity (kW)": 3.2, "Installation Date": "2021-04-01"})

    assert record.kwp is None
    assert record.capacity == 3.2
    assert record.installation_date == "2021-04-01"


def test_address_from_row_accepts_lowercase_column():
    assert address_from_row({"address": "Kerkweg 6"}) == "Kerkweg 6"
    assert address_from_row({"Address": "", "address": "Kerkweg 6"}) == "Kerkweg 6"
    assert address_from_row({}) == ""


def test_build_dataset_skips_rows_without_address():
    dataset = build_dataset([{"Panels": 4}, {"Address": "  ", "Panels": 5}, {"Address": "Kerkweg 6"}])

    assert list(dataset) == ["kerkweg 6"]


def test_build_dataset_keeps_last_duplicate():
    dataset = build_dataset([{"Address": "Kerkweg 6", "Panels": 4}, {"Address": "kerkweg, 6", "Panels": 9}])

    assert dataset["kerkweg 6"].panels == 9


def test_build_dataset_logs_count(rows, caplog):
    with caplog.at_level(logging.INFO, logger="solar_lookup.records"):
        build_dataset(rows)

    assert "Loaded 3 addresses" in caplog.text

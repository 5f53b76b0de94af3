from linecov.inputs.records import load_records, records_from_document

__all__ = ["load_records", "records_from_document"]

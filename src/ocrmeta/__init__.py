"""Fold OCR output of a digitization item into a bibliographic metadata field."""

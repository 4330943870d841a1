"""Lexicon, schemas, errors and id resolution for futbol-nlq."""

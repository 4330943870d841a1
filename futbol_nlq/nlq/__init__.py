"""Query understanding: parsing, context, request planning and answer synthesis."""

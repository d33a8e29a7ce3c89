"""BookReel backend: short vertical book-promo videos from a text brief."""

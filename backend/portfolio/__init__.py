"""Portfolio site content service: public content API plus the admin editing surface."""

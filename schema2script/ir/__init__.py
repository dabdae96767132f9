"""IR (Intermediate Representation) of a relational schema."""

"""Fixed values shared by the generator and the test helper."""

# JSON Schema draft emitted in every document
DRAFT_06_SCHEMA_URI = "http://json-schema.org/draft-06/schema#"

# Marker in the associations option that embeds an association
INLINE = "inline"

# Association kinds that hold many records, compared lower-cased
MANY_ASSOCIATION_TYPES = frozenset(
    {"hasmany", "belongstomany", "has_many", "belongs_to_many"}
)

# Native type forced onto uuid-shaped attributes
UUID_NATIVE_TYPE = "STRING"

# Native type whose values are listed in the property's enum
ENUM_NATIVE_TYPE = "ENUM"

# Fields each top-level property must carry to count as described
DEFAULT_DESCRIBED_FIELDS = ("description", "examples", "type", "title", "$id")

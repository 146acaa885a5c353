from middb.schema import Column, DataType, TableSchema, TableSchemaBuilder


def test_column_creation():
    col = Column.non_null("id", DataType.INT64)
    assert col.name == "id"
    assert col.data_type == DataType.INT64
    assert not col.nullable


def test_default_column_is_nullable():
    col = Column("name", DataType.STRING)
    assert col.nullable
    assert col.position == 0


def test_schema_builder():
    schema = (
        TableSchemaBuilder("users")
        .column("id", DataType.INT64, False)
        .column("name", DataType.STRING, False)
        .column("email", DataType.STRING, True)
        .build()
    )

    assert schema.name == "users"
    assert schema.column_count() == 3

    id_col = schema.get_column("id")
    assert id_col.position == 0
    assert not id_col.nullable

    email_col = schema.get_column("email")
    assert email_col.position == 2
    assert email_col.nullable


def test_column_lookup():
    schema = (
        TableSchemaBuilder("products")
        .column("sku", DataType.STRING, False)
        .column("price", DataType.INT64, False)
        .build()
    )

    assert schema.get_column_index("price") == 1
    assert schema.get_column_index("unknown") is None
    assert schema.get_column("unknown") is None


def test_data_type_display():
    schema = (
        TableSchemaBuilder("t")
        .column("a", DataType.INT64, False)
        .column("b", DataType.STRING, True)
        .column("c", DataType.BYTES, True)
        .column("d", DataType.BOOL, True)
        .build()
    )
    assert [str(c.data_type) for c in schema.columns] == ["INT64", "STRING", "BYTES", "BOOL"]
    assert f"{schema.get_column('c').data_type}" == "BYTES"


def test_data_type_compatibility():
    assert DataType.INT64.is_compatible(DataType.INT64)
    assert not DataType.INT64.is_compatible(DataType.STRING)


def test_positions_renumbered_on_construction():
    cols = [Column("a", DataType.INT64, position=7), Column("b", DataType.BOOL, position=7)]
    schema = TableSchema("t", cols)
    assert [c.position for c in schema.columns] == [0, 1]


def test_empty_and_add_column():
    schema = TableSchema.empty("t")
    assert schema.column_count() == 0
    schema.add_column(Column("x", DataType.BYTES, position=5))
    schema.add_column(Column.non_null("y", DataType.INT64))
    assert schema.column_names() == ["x", "y"]
    assert schema.get_column("y").position == 1
    assert schema.get_column("x").position == 0
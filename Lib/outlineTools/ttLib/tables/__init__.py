"""Table decoders, one module per tag (see ttLib.getTableModule)."""

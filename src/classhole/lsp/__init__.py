"""Editor integration: diagnostics and outline for .ch documents."""

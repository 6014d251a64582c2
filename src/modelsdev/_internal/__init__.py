"""Internal building blocks shared across modelsdev."""

"""Domain layer: input rules, topology selection and regulator models."""

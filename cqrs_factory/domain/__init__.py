"""Domain package: error taxonomy and collaborator protocols."""

"""Infrastructure: platform clients, Discord adapters, persistence."""

"""Feature packages composing the list, apply and convert pipelines."""

"""Platform adapters: filesystem, logging and the external encoder."""

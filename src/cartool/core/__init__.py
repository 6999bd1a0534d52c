"""cartool core: errors, logging, settings, service protocol, transports."""

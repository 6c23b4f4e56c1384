"""Infrastructure modules for mailroom.

Centralized infrastructure components:
- configuration: Settings management (Settings, SlackSettings, NotifierSettings)
- identifiers: Namespaced identities used to address recipients
- identity: Recipient users and user stores
- logging: Structured logging (configure_logging, get_module_logger)
- notifications: Notification model, transports and dispatcher
- operations: Error taxonomy, aggregation and classification
- services: Application-scoped providers (get_settings)
"""

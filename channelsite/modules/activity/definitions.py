from channelsite.panels.resource_panel import PanelDefinition


DEPLOYMENTS = PanelDefinition(
    section_id="deployments",
    title="Deployments",
    description="Manage deployments and hosting",
    table="deployments",
    noun="deployment",
    name_field="url",
    deletable=False,
)

AUDIT_LOGS = PanelDefinition(
    section_id="audit",
    title="Audit Logs",
    description="Track system activity and security events",
    table="audit_logs",
    noun="audit log entry",
    name_field="action",
    deletable=False,
)

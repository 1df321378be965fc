"""
Section registries for the two portals, in menu order.

Each entry builds a fresh section from the shared gateway; nothing is
reused between mounts.
"""

from typing import Callable, List

from channelsite.database.gateway import BackendGateway
from channelsite.modules.activity.definitions import AUDIT_LOGS, DEPLOYMENTS
from channelsite.modules.catalog.service import DatabaseCatalogPanel
from channelsite.modules.creator.service import CreatorWorkspace
from channelsite.modules.credentials.definitions import (
    AI_API_KEYS, API_KEYS, GITHUB_TOKENS, NETLIFY_API_KEYS, YOUTUBE_API_KEYS
)
from channelsite.modules.overview.service import OverviewSection, UsageAnalyticsSection
from channelsite.modules.projects.service import ProjectApprovalPanel
from channelsite.modules.query_runner.service import QueryRunner
from channelsite.modules.system_status.service import SystemStatusPanel
from channelsite.modules.users.service import UserManagementPanel
from channelsite.panels.base import Section, StaticSection
from channelsite.panels.resource_panel import PanelDefinition, ResourcePanel

SectionFactory = Callable[[BackendGateway, str], Section]


class SectionEntry:
    def __init__(self, section_id: str, label: str, factory: SectionFactory):
        self.section_id = section_id
        self.label = label
        self.factory = factory


def _resource(definition: PanelDefinition) -> SectionFactory:
    return lambda gateway, mask_char: ResourcePanel(definition, gateway, mask_char)


def _static(section_id: str, title: str, description: str) -> SectionFactory:
    return lambda gateway, mask_char: StaticSection(section_id, title, description)


DEVELOPER_SECTIONS: List[SectionEntry] = [
    SectionEntry("overview", "Overview", lambda gateway, mask_char: OverviewSection(gateway)),
    SectionEntry("users", "User Management", UserManagementPanel),
    SectionEntry("projects", "Project Approval", ProjectApprovalPanel),
    SectionEntry("api", "API Keys", _resource(API_KEYS)),
    SectionEntry("ai-keys", "AI API Keys", _resource(AI_API_KEYS)),
    SectionEntry("database", "Database", DatabaseCatalogPanel),
    SectionEntry("query", "Query Runner", lambda gateway, mask_char: QueryRunner(gateway)),
    SectionEntry("analytics", "Analytics", lambda gateway, mask_char: UsageAnalyticsSection(gateway)),
    SectionEntry("config-analytics", "Config Analytics", _static(
        "config-analytics", "Config Analytics", "System configuration monitoring and analysis")),
    SectionEntry("youtube", "YouTube API", _resource(YOUTUBE_API_KEYS)),
    SectionEntry("github", "GitHub", _resource(GITHUB_TOKENS)),
    SectionEntry("netlify", "Netlify", _resource(NETLIFY_API_KEYS)),
    SectionEntry("deployments", "Deployments", _resource(DEPLOYMENTS)),
    SectionEntry("security", "Security", _static(
        "security", "Security Settings", "Configure security and access controls")),
    SectionEntry("system", "System Settings", _static(
        "system", "System Settings", "Configure system-wide settings")),
    SectionEntry("email", "Email Config", _static(
        "email", "Email Configuration", "Configure email services and templates")),
    SectionEntry("payments", "Payments", _static(
        "payments", "Payment Settings", "Configure payment processing and billing")),
    SectionEntry("webhooks", "Webhooks", _static(
        "webhooks", "Webhook Management", "Configure and manage webhook endpoints")),
    SectionEntry("domains", "Domains", _static(
        "domains", "Domain Management", "Manage custom domains and DNS settings")),
    SectionEntry("monitoring", "Monitoring", SystemStatusPanel),
    SectionEntry("backups", "Backups", _static(
        "backups", "Backup Management", "Manage data backups and restoration")),
    SectionEntry("audit", "Audit Logs", _resource(AUDIT_LOGS)),
    SectionEntry("files", "File Manager", _static(
        "files", "File Manager", "Manage files and storage")),
]

CREATOR_SECTIONS: List[SectionEntry] = [
    SectionEntry("workspace", "Workspace", CreatorWorkspace),
    SectionEntry("status", "API Status", lambda gateway, mask_char: SystemStatusPanel(
        gateway, mask_char, section_id="status")),
]

"""Module: prepboard.config.catalog

Date: 2026-10-19

Static widget catalog shipped with an installation.

Rows are plain dictionaries so they can be replaced by a JSON file without
code changes; ``prepboard.core.catalog_import.load_catalog`` validates them.
"""

DEFAULT_CATALOG = [
    # Dashboard
    {"id": "total-projects", "title": "Total Live Tenders", "category": "projects",
     "pages": ["dashboard"], "size": "extra-large", "order": 1, "enabled": True},
    {"id": "active-projects", "title": "Active Projects", "category": "projects",
     "pages": ["dashboard", "projects"], "size": "large", "order": 2, "enabled": True},
    {"id": "kpis", "title": "Active Project KPIs", "category": "analytics",
     "pages": ["dashboard"], "size": "large", "order": 3, "enabled": True},
    {"id": "budget-vs-spend", "title": "Budget vs Spend", "category": "financial",
     "pages": ["dashboard"], "size": "extra-large", "order": 4, "enabled": True},
    {"id": "deadlines", "title": "ITT Deadlines", "category": "itt",
     "pages": ["dashboard", "itt-manager"], "size": "large", "order": 5, "enabled": True},
    {"id": "supplier-rankings", "title": "Supplier Rankings", "category": "supply",
     "pages": ["dashboard", "supply-chain"], "size": "medium", "order": 6, "enabled": False},
    {"id": "completion-rate", "title": "Completion Rate", "category": "analytics",
     "pages": ["dashboard"], "size": "medium", "order": 7, "enabled": False},
    {"id": "supplier-network", "title": "Supplier Network", "category": "supply",
     "pages": ["dashboard", "supply-chain"], "size": "large", "order": 8, "enabled": False},
    {"id": "quick-insights", "title": "Quick Insights", "category": "insights",
     "pages": ["dashboard"], "size": "medium", "order": 9, "enabled": False},
    {"id": "pending-itts", "title": "Pending ITTs", "category": "itt",
     "pages": ["dashboard"], "size": "medium", "order": 10, "enabled": False},
    {"id": "satisfaction-trend", "title": "Satisfaction Trend", "category": "insights",
     "pages": ["dashboard"], "size": "large", "order": 11, "enabled": False},
    {"id": "performance-analytics", "title": "Performance Analytics", "category": "analytics",
     "pages": ["dashboard"], "size": "extra-large", "order": 12, "enabled": False},
    # ITT manager
    {"id": "active-itts-table", "title": "Active ITTs", "category": "itt",
     "pages": ["itt-manager"], "size": "extra-large", "order": 0, "enabled": True},
    {"id": "draft-itts-widget", "title": "Draft ITTs", "category": "itt",
     "pages": ["itt-manager"], "size": "small", "order": 1, "enabled": True},
    {"id": "sent-itts-widget", "title": "Sent ITTs", "category": "itt",
     "pages": ["itt-manager"], "size": "small", "order": 2, "enabled": True},
    {"id": "responses-widget", "title": "Responses", "category": "itt",
     "pages": ["itt-manager"], "size": "small", "order": 3, "enabled": True},
    {"id": "urgent-itts-widget", "title": "Urgent ITTs", "category": "itt",
     "pages": ["itt-manager"], "size": "small", "order": 4, "enabled": True},
]

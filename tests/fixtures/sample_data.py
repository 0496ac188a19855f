"""
Sample Atlassian API payloads for testing.

Trimmed copies of real response shapes from Jira Cloud, Jira Service
Management and the Atlassian Admin API.
"""

SITE = "https://example.atlassian.net/"

SAMPLE_API_RESPONSES = {
    "issue_votes": {
        "self": "https://example.atlassian.net/rest/api/3/issue/10001/votes",
        "votes": 2,
        "hasVoted": True,
        "voters": [
            {
                "self": "https://example.atlassian.net/rest/api/3/user?accountId=5b10a2844c20165700ede21g",
                "accountId": "5b10a2844c20165700ede21g",
                "displayName": "Mia Krystof",
                "active": True
            },
            {
                "self": "https://example.atlassian.net/rest/api/3/user?accountId=5b10ac8d82e05b22cc7d4ef5",
                "accountId": "5b10ac8d82e05b22cc7d4ef5",
                "displayName": "Emma Richards",
                "active": False
            }
        ]
    },
    "screen_scheme_page": {
        "self": "https://example.atlassian.net/rest/api/3/screenscheme?startAt=0&maxResults=25",
        "maxResults": 25,
        "startAt": 0,
        "total": 2,
        "isLast": True,
        "values": [
            {
                "id": 10010,
                "name": "Employee screen scheme",
                "description": "Manage employee data",
                "screens": {"default": 10017, "edit": 10019, "create": 10019, "view": 10020}
            },
            {
                "id": 10032,
                "name": "Office screen scheme",
                "description": "Manage office data",
                "screens": {"default": 10020}
            }
        ]
    },
    "screen_scheme_created": {
        "id": 10001
    },
    "customer_request": {
        "issueId": "107001",
        "issueKey": "DESK-11",
        "requestTypeId": "25",
        "serviceDeskId": "10",
        "reporter": {
            "accountId": "qm:a713c8ea-1075-4e30-9d96-891a7d181739:5ad6d3581db05e2a66fa80b",
            "displayName": "Fred F. User",
            "emailAddress": "fred@example.com"
        },
        "currentStatus": {"status": "Waiting for Support", "statusCategory": "NEW"},
        "requestFieldValues": [
            {"fieldId": "summary", "label": "What do you need?", "value": "Request JSD help via REST"}
        ],
        "_links": {"web": "https://example.atlassian.net/servicedesk/customer/portal/10/DESK-11"}
    },
    "admin_user_profile": {
        "account": {
            "account_id": "5b10ac8d82e05b22cc7d4ef5",
            "name": "Mia Krystof",
            "nickname": "mia",
            "zoneinfo": "Europe/Berlin",
            "locale": "en-US",
            "email": "mia@example.com",
            "picture": "https://avatar-management.example.com/mia.png",
            "account_type": "atlassian",
            "account_status": "active",
            "email_verified": True,
            "extended_profile": {"job_title": "Engineer", "team_type": "Software Engineering"}
        }
    },
    "admin_user_permissions": {
        "email.set": {"allowed": False, "reason": {"key": "not.managed"}},
        "lifecycle.enablement": {"allowed": True},
        "profile": {
            "name": {"allowed": True},
            "nickname": {"allowed": True}
        },
        "apiToken.read": {"allowed": True},
        "apiToken.delete": {"allowed": False}
    },
    "jira_error": {
        "errorMessages": ["Issue does not exist or you do not have permission to see it."],
        "errors": {}
    }
}

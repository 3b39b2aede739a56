"""Value pools for ``seed_demo_data``."""

from __future__ import annotations


DEMO_LOCATIONS = sorted(
    {
        "Berlin",
        "Bristol",
        "Cambridge",
        "Leeds",
        "London",
        "Manchester",
        "New York",
        "Remote",
        "San Francisco",
        "Toronto",
    }
)

DEMO_TAGS = [
    "backend",
    "frontend",
    "full-stack",
    "devops",
    "data",
    "design",
    "mobile",
    "qa",
]

DEMO_SKILLS = [
    "python",
    "django",
    "postgresql",
    "react",
    "javascript",
    "typescript",
    "docker",
    "aws",
    "linux",
    "sql",
    "figma",
    "go",
    "kubernetes",
    "node.js",
    "git",
    "rest",
]

COMPANY_NAMES = [
    "NorthBridge Labs",
    "Harbor Metrics",
    "BluePeak Systems",
    "CedarStone Digital",
    "OrbitGrid Tech",
    "Skyforge Data",
]

JOB_TEMPLATES = [
    ("Backend Developer", "Build and maintain APIs, background jobs, and PostgreSQL schemas.", "backend"),
    ("Frontend Engineer", "Develop responsive interfaces with modern JavaScript and API integrations.", "frontend"),
    ("Full Stack Developer", "Own features end-to-end across REST APIs and frontend modules.", "full-stack"),
    ("Data Analyst", "Turn product and hiring data into dashboards and actionable insights.", "data"),
    ("DevOps Engineer", "Automate CI/CD pipelines, deployments, and runtime monitoring.", "devops"),
    ("QA Engineer", "Write test cases, automate regression suites, and improve release quality.", "qa"),
    ("Product Designer", "Prototype user journeys and design system components with Figma.", "design"),
]

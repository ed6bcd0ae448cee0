from typing import List, get_args

from logspark.models import AppView, PricingPlan, TemplateInfo

TEMPLATES: List[TemplateInfo] = [
    TemplateInfo(id="standard", name="Standard", icon="📝", desc="Balanced & professional"),
    TemplateInfo(id="marketing", name="SaaS Update", icon="🚀", desc="Benefit-focused & punchy"),
    TemplateInfo(id="technical", name="Technical", icon="🛠️", desc="Detailed & precise"),
    TemplateInfo(id="minimal", name="Minimal", icon="📄", desc="Short & sweet"),
]

PRICING_PLANS: List[PricingPlan] = [
    PricingPlan(
        id="starter",
        name="Starter",
        price="$0",
        features=["5 Changelogs / mo", "Standard Template", "Manual Input only", "Markdown Export"],
    ),
    PricingPlan(
        id="pro",
        name="Pro",
        price="$12",
        features=[
            "Unlimited Changelogs",
            "All 4 Templates",
            "GitHub Integration",
            "HTML & Plain Text Export",
            "Custom Branding",
        ],
        recommended=True,
    ),
    PricingPlan(
        id="enterprise",
        name="Business",
        price="$49",
        features=[
            "Team Workspaces",
            "API Access",
            "Automated Webhooks",
            "Dedicated Support",
            "Whitelabeling",
        ],
    ),
]

VIEWS: List[str] = list(get_args(AppView))

"""Built-in portfolio, blog and gradient content."""

from studio.domain.content.model.catalog import CanonicalCatalog
from studio.domain.content.model.content import (
    BlogPost,
    ContentItem,
    Gradient,
    GradientColor,
    ImpactMetric,
    Project,
    ProjectSection,
    Visibility,
)

_UNSPLASH = "https://images.unsplash.com"

DEFAULT_PROJECTS: list[Project] = [
    # Public case studies - visible to all visitors
    Project(
        id="public-1",
        title="Smart Home Dashboard",
        description=(
            "Redesigning IoT device management for seamless smart home control "
            "with intuitive automation and energy insights."
        ),
        category="Mobile App",
        duration="4 months",
        team="5 people",
        role="Lead UX Designer",
        image=f"{_UNSPLASH}/photo-1558618666-fcd25c85cd64?w=1200&h=800&fit=crop",
        featured=True,
        technologies=["React Native", "IoT Integration", "Node.js", "MongoDB"],
        impact=[
            ImpactMetric(metric="Setup Time Reduction", value="75%"),
            ImpactMetric(metric="User Satisfaction", value="4.9/5"),
        ],
        sections=[
            ProjectSection(
                title="The Challenge",
                content=(
                    "Smart home device management was fragmented across multiple "
                    "apps, creating user confusion and low adoption rates."
                ),
            ),
        ],
    ),
    Project(
        id="public-2",
        title="Sustainable Fashion Marketplace",
        description=(
            "Creating a transparent, community-driven platform that connects "
            "conscious consumers with sustainable fashion brands worldwide."
        ),
        category="E-commerce",
        duration="6 months",
        team="8 people",
        role="Senior UX Designer & Sustainability Lead",
        image=f"{_UNSPLASH}/photo-1441986300917-64674bd600d8?w=1200&h=800&fit=crop",
        featured=True,
        technologies=["React", "Blockchain", "AI Recommendations", "GraphQL"],
        impact=[ImpactMetric(metric="Brand Partners", value="200+")],
    ),
    Project(
        id="public-3",
        title="AR Learning Platform for Kids",
        description=(
            "Transforming early childhood education through immersive augmented "
            "reality experiences that make learning science and math engaging."
        ),
        category="Mobile App",
        duration="8 months",
        team="12 people",
        role="Principal UX Designer & Child Development Specialist",
        image=f"{_UNSPLASH}/photo-1503676260728-1c00da094a0b?w=1200&h=800&fit=crop",
        featured=True,
        technologies=["Unity", "ARKit", "Machine Learning", "Firebase"],
    ),
    # Private case studies - require a signed-in viewer
    Project(
        id="private-1",
        title="Enterprise Financial Dashboard",
        description=(
            "Redesigning complex financial analytics for Fortune 500 CFOs with "
            "real-time insights, predictive modeling, and collaborative planning tools."
        ),
        category="Enterprise SaaS",
        duration="12 months",
        team="15 people",
        role="Principal UX Designer & Strategy Lead",
        image=f"{_UNSPLASH}/photo-1551288049-bebda4e38f71?w=1200&h=800&fit=crop",
        visibility=Visibility.PRIVATE,
        featured=True,
        technologies=["React", "D3.js", "Python", "Kubernetes", "Tableau"],
    ),
    Project(
        id="private-2",
        title="Healthcare AI Diagnostic Tool",
        description=(
            "Developing AI-powered diagnostic assistance for radiologists with "
            "advanced image analysis and collaborative review workflows."
        ),
        category="Healthcare",
        duration="18 months",
        team="20+ people",
        role="Senior UX Researcher & Clinical Workflow Designer",
        image=f"{_UNSPLASH}/photo-1576091160399-112ba8d25d1f?w=1200&h=800&fit=crop",
        visibility=Visibility.PRIVATE,
    ),
    Project(
        id="private-3",
        title="Cryptocurrency Trading Platform",
        description=(
            "Building institutional-grade crypto trading infrastructure with "
            "advanced order management, risk analytics, and compliance features."
        ),
        category="FinTech",
        duration="10 months",
        team="25 people",
        role="Lead UX Designer & Risk Management Specialist",
        image=f"{_UNSPLASH}/photo-1611974789855-9c2a0a7236a3?w=1200&h=800&fit=crop",
        visibility=Visibility.PRIVATE,
    ),
]

DEFAULT_POSTS: list[BlogPost] = [
    BlogPost(
        id="1",
        title="The Psychology of Color in UX Design: How Hues Influence User behavior",
        excerpt=(
            "Discover how different colors impact user emotions, decision-making, "
            "and overall experience in digital products."
        ),
        content="# The Psychology of Color in UX Design",
        author="Alex Chen",
        author_role="Senior UX Designer",
        published_at="2024-01-15",
        read_time="8 min read",
        category="UX Design",
        tags=["color theory", "psychology"],
        featured=True,
    ),
    BlogPost(
        id="2",
        title="Building Scalable Design Systems: A Complete Guide",
        excerpt=(
            "Learn how to create design systems that grow with your product and "
            "team, from atomic components to comprehensive documentation."
        ),
        author="Alex Chen",
        author_role="Senior UX Designer",
        published_at="2024-01-08",
        read_time="12 min read",
        category="Design Systems",
        tags=["design systems", "components"],
        visibility=Visibility.PRIVATE,
    ),
    BlogPost(
        id="3",
        title="User Research Methods for Remote Teams",
        excerpt=(
            "Adapt your user research practices for distributed teams and remote "
            "participants with these proven techniques and tools."
        ),
        author="Alex Chen",
        author_role="Senior UX Designer",
        published_at="2023-12-20",
        read_time="6 min read",
        category="User Research",
        tags=["research", "remote"],
    ),
    BlogPost(
        id="4",
        title="The ROI of UX: Measuring Design Impact",
        excerpt=(
            "Learn how to quantify the business value of UX design and communicate "
            "impact to stakeholders through metrics that matter."
        ),
        author="Alex Chen",
        author_role="Senior UX Designer",
        published_at="2023-12-12",
        read_time="10 min read",
        category="Business",
        tags=["metrics", "strategy"],
        visibility=Visibility.PRIVATE,
    ),
]


def _gradient(id: str, name: str, category: str, start: tuple[str, str], end: tuple[str, str]) -> Gradient:
    return Gradient(
        id=id,
        name=name,
        category=category,
        tags=[category.lower()],
        colors=[
            GradientColor(hex=start[0], name=start[1], position=0),
            GradientColor(hex=end[0], name=end[1], position=100),
        ],
        css=f"linear-gradient(135deg, {start[0]} 0%, {end[0]} 100%)",
        direction="135deg",
    )


DEFAULT_GRADIENTS: list[Gradient] = [
    _gradient("1", "Sunset Glow", "Sunset", ("#FF6B6B", "Coral Red"), ("#FFE66D", "Golden Yellow")),
    _gradient("2", "Ocean Breeze", "Ocean", ("#4ECDC4", "Turquoise"), ("#44A08D", "Teal")),
    _gradient("3", "Purple Haze", "Purple", ("#667eea", "Periwinkle"), ("#764ba2", "Royal Purple")),
    _gradient("4", "Forest Whisper", "Nature", ("#56ab2f", "Forest Green"), ("#a8e6cf", "Mint Green")),
    _gradient("5", "Cosmic Dawn", "Cosmic", ("#ff9a9e", "Rose Pink"), ("#fecfef", "Lavender Pink")),
    _gradient("6", "Arctic Flow", "Cool", ("#a8edea", "Ice Blue"), ("#fed6e3", "Soft Pink")),
]


def default_catalog() -> CanonicalCatalog:
    items: list[ContentItem] = [*DEFAULT_PROJECTS, *DEFAULT_POSTS, *DEFAULT_GRADIENTS]
    return CanonicalCatalog(items)

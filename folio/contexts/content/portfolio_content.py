"""Hard-coded portfolio content."""

from folio.contexts.content.portfolio_data_structures import (
    Experience,
    FunStuff,
    Portfolio,
    StyledSpan,
    styled_line,
)


def _lead(text: str) -> StyledSpan:
    # Highlighted opening phrase of an achievement
    return StyledSpan(text).light_green().bold()


PORTFOLIO = Portfolio(
    owner="Yew Jung",
    summary=(
        "Backend engineer with 5+ years of experience building scalable systems in fintech. "
        "Skilled in leading architecture, improving performance, and delivering product "
        "features end-to-end."
    ),
    jobs=(
        Experience(
            title="Backend Engineer @ BigPay",
            achievements=(
                styled_line(
                    _lead("Led the architecture and implementation "),
                    "of credit and debit card top-ups, enabling seamless funding of user wallets at scale",
                ),
                styled_line(
                    _lead("Designed and built "),
                    "a new in-person onboarding flow, significantly streamlining the signup process "
                    "for face-to-face customer interactions",
                ),
                styled_line(
                    _lead("Led the development "),
                    "of a feature enabling users to make charity donations through the app, "
                    "integrating with external partners to ensure secure, user-friendly transactions.",
                ),
                styled_line(
                    _lead("Redesigned a core transaction storage system "),
                    "improving performance, reliability, and maintainability while reducing system "
                    "complexity.",
                ),
                styled_line(
                    _lead("Architected and delivered "),
                    "a budget tracking service that empowers users to set and monitor overall and "
                    "category-specific spending limits.",
                ),
                styled_line(
                    _lead("Built a real-time monitoring and alerting infrastructure "),
                    "using Grafana and Prometheus to detect unusual user behaviours and potential "
                    "malicious activities.",
                ),
                styled_line(
                    _lead("Integrated Singpass"),
                    ", Singapore’s digital identity service, into the signup flow for Singaporean "
                    "users, ensuring seamless onboarding experience.",
                ),
            ),
        ),
        Experience(
            title="Senior Software Engineer @ Theta Service Partner",
            achievements=(
                styled_line(
                    _lead("Led and design and implementation "),
                    "of an internal backend framework to streamline workflows and improve "
                    "engineering efficiency.",
                ),
                styled_line(
                    _lead("Optimized loan system performance "),
                    "for financial clients achieving a 10x reduction in response time.",
                ),
                styled_line(
                    _lead("Mentored and onboarded "),
                    "new engineers, helping them ramp up quickly and contribute effectively to "
                    "client projects.",
                ),
            ),
        ),
        Experience(
            title="Software Engineer @ Theta Service Partner",
            achievements=(
                styled_line("Created internal tools, optimising team workflows and productivity"),
                styled_line(
                    "Provided support to UK-based client projects and managed server deployment "
                    "for seamless system operations"
                ),
            ),
        ),
    ),
    projects=(
        FunStuff(
            title="Multiplayer Poker Game",
            url="https://www.github.com/yewjung/poker-rust",
        ),
        FunStuff(
            title="Deck API",
            url="https://www.github.com/yewjung/deck",
        ),
    ),
)

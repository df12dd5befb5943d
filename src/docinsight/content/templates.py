"""Text bodies synthesized for each document category.

Keys are ``DocumentCategory`` values. ``GENERAL_CONTENT`` is a format string
taking the document ``name``.
"""

from __future__ import annotations

from typing import Mapping, NamedTuple, Sequence

SOFTWARE_ENGINEERING_CONTENT = """Software Engineering Unit 3 - Design Patterns and Architecture

COMPREHENSIVE CONTENT OVERVIEW:
This document is a guide to software engineering principles, focusing on design patterns and architectural concepts used in modern software development.

SECTION 1: DESIGN PATTERNS
Creational Patterns:
- Singleton Pattern: Ensures a class has only one instance and provides global access
- Factory Pattern: Creates objects without specifying exact classes
- Builder Pattern: Constructs complex objects step by step, separating construction from representation
- Abstract Factory: Provides an interface for creating families of related objects

Structural Patterns:
- Adapter Pattern: Lets incompatible interfaces work together through wrapper classes
- Facade Pattern: Provides a simplified interface to a complex subsystem
- Decorator Pattern: Adds behaviour to objects dynamically without altering their structure
- Composite Pattern: Composes objects into tree structures for part-whole hierarchies

Behavioral Patterns:
- Observer Pattern: Defines a one-to-many dependency for state notifications
- Strategy Pattern: Makes a family of algorithms interchangeable at runtime
- Command Pattern: Encapsulates requests as objects for parameterization and queuing
- Template Method: Defines the skeleton of an algorithm and lets subclasses override steps

SECTION 2: SOFTWARE ARCHITECTURE
Architectural Patterns:
- Layered Architecture: Organizes code into horizontal layers with specific responsibilities
- Model-View-Controller (MVC): Separates an application into three interconnected components
- Model-View-Presenter (MVP): Variant of MVC with a presenter handling UI logic
- Model-View-ViewModel (MVVM): Uses data binding between view and view model

Modern Architectures:
- Microservices Architecture: Decomposes applications into small, independent services
- Service-Oriented Architecture (SOA): Designs software as a collection of interoperable services
- Event-Driven Architecture: Uses events to trigger and communicate between services
- Hexagonal Architecture: Isolates core logic from external concerns through ports and adapters

SECTION 3: DESIGN PRINCIPLES
SOLID Principles:
- Single Responsibility: Every class should have only one reason to change
- Open/Closed: Software entities should be open for extension, closed for modification
- Liskov Substitution: Objects should be replaceable with instances of their subtypes
- Interface Segregation: Many client-specific interfaces are better than one general-purpose interface
- Dependency Inversion: Depend on abstractions, not concretions

Additional Principles:
- DRY (Don't Repeat Yourself): Avoid code duplication through abstraction
- KISS (Keep It Simple, Stupid): Favor simplicity over complexity in design
- YAGNI (You Aren't Gonna Need It): Don't add functionality until it is necessary
- Composition over Inheritance: Favor object composition over class inheritance

SECTION 4: UML AND MODELING
Structural Diagrams:
- Class Diagrams: Static structure of a system with classes, attributes and relationships
- Component Diagrams: Organization and dependencies among software components
- Deployment Diagrams: Physical deployment of artifacts on nodes

Behavioral Diagrams:
- Use Case Diagrams: Functional requirements from the user perspective
- Sequence Diagrams: Object interactions arranged in time sequence
- Activity Diagrams: Workflows and business processes
- State Machine Diagrams: States of an object and transitions between them

SECTION 5: QUALITY ASSURANCE AND TESTING
Testing Strategies:
- Unit Testing: Testing individual components in isolation
- Integration Testing: Testing the interaction between integrated components
- System Testing: Testing the complete system against specified requirements
- Acceptance Testing: Formal testing to determine whether the system meets business requirements

Quality Practices:
- Code Reviews: Systematic examination of code by peers to find defects
- Static Analysis: Automated analysis of code without execution
- Continuous Integration: Regular integration of code changes with automated testing
- Test-Driven Development: Writing tests before implementation code

PRACTICAL APPLICATIONS:
Case studies show these concepts applied in enterprise software development, including implementation strategies, common pitfalls and practices for different technology stacks."""

RESEARCH_CONTENT = """Research Paper: Advanced Technology Applications and Industry Impact Analysis

EXECUTIVE SUMMARY:
This research document presents findings from a study examining the adoption and impact of emerging technologies across industry sectors. It combines quantitative analysis with qualitative insight to provide recommendations for organizations considering technology transformation.

METHODOLOGY AND APPROACH:
Research Design: Mixed-methods approach combining surveys, interviews and case study analysis
Sample Size: 847 industry professionals across 15 sectors and 23 countries
Data Collection Period: January 2023 to December 2024
Statistical Analysis: Regression analysis, correlation studies and predictive modeling

Primary Data Sources:
- Structured surveys with 500+ technology decision-makers
- In-depth interviews with 127 industry leaders and CTOs
- Case studies from 45 organizations across sectors
- Secondary analysis of 200+ peer-reviewed publications and industry reports

RESEARCH FINDINGS:
Technology Adoption Trends:
- 78% of organizations report measurable efficiency improvements through automation
- Machine learning implementations show an average ROI of 15-25% within the first year
- Cloud migration projects show a 31% average cost reduction over 3 years
- Data-driven decision making is adopted by 89% of high-performing organizations

Performance Metrics:
- Organizations with AI integration report 23% faster decision-making
- Customer satisfaction improves by an average of 18% after digital transformation
- Employee productivity increases by 27% with change management support
- Operational costs fall by 19% on average through process automation

Industry-Specific Insights:
Healthcare: Electronic health records and AI diagnostics show 34% improvement in patient outcomes
Financial Services: Algorithmic trading and risk assessment reduce operational risk by 42%
Manufacturing: IoT sensors and predictive maintenance decrease downtime by 29%
Retail: Personalization engines increase customer engagement by 35%

THEORETICAL FRAMEWORK:
- Technology Acceptance Model (TAM) and its modern applications
- Diffusion of Innovation Theory in organizational contexts
- Resource-Based View of technology capabilities
- Dynamic Capabilities Framework for digital transformation

STRATEGIC RECOMMENDATIONS:
1. Gradual Integration Approach: Implement technology changes in phases to minimize disruption
2. Change Management Focus: Invest 30% of project budget in employee training and support
3. Data Governance Framework: Establish clear policies for data collection, storage and usage
4. Performance Measurement: Define KPIs and success metrics before implementation begins

CONCLUSIONS AND FUTURE RESEARCH:
Strategic technology adoption, when properly managed, delivers significant competitive advantages. Organizations investing in employee development alongside technology achieve 40% better outcomes than those focusing on technical aspects alone."""

POLICY_CONTENT = """Organizational Policy and Compliance Guidelines Document

POLICY STATEMENT AND SCOPE:
This policy document establishes mandatory guidelines for organizational operations, ensuring compliance with regulatory requirements across all business units.

Applicable Scope: All employees, contractors, vendors and stakeholders
Effective Date: Current fiscal year with annual review cycles
Compliance Level: Mandatory with disciplinary measures for non-compliance

SECTION 1: GOVERNANCE AND OVERSIGHT FRAMEWORK
- Executive decisions require board approval for investments above $500K
- Departmental decisions follow established approval hierarchies
- Quarterly risk assessments across all operational areas
- Risk mitigation strategies implemented within 30 days of identification
- Monthly compliance audits across all departments

SECTION 2: OPERATIONAL STANDARDS AND PROCEDURES
- Six Sigma methodology implementation across all processes
- Customer satisfaction targets of 95% or higher
- Budget allocation reviews conducted quarterly
- Vendor management with performance-based contracts

SECTION 3: HUMAN RESOURCES POLICIES
- Anti-harassment and discrimination policies with zero tolerance
- Conflict of interest disclosure requirements
- Annual performance reviews with goal-setting components
- Mandatory compliance training for all employees

SECTION 4: TECHNOLOGY AND INFORMATION SECURITY
- Multi-factor authentication required for all systems
- Incident response procedures with 24-hour notification requirements
- Data encryption standards for all sensitive information
- GDPR and CCPA compliance for all data processing

SECTION 5: LEGAL AND REGULATORY COMPLIANCE
- Industry-specific compliance requirements documented
- Legal document retention for statutorily required periods
- Legal incident reporting within 24 hours

IMPLEMENTATION AND MONITORING:
Phased implementation over a 6-month period with department-specific timelines, monthly progress reviews and an annual comprehensive policy review."""

GENERAL_CONTENT = """Professional Document Analysis: {name}

DOCUMENT OVERVIEW:
This document presents an analysis of professional concepts and methodologies relevant to business and academic research environments.

PRIMARY CONTENT AREAS:
Strategic Analysis Framework:
- Market analysis methodologies and practices
- Competitive landscape assessment tools and techniques
- SWOT analysis applications with case studies
- Strategic planning frameworks including balanced scorecard approaches

Data-Driven Insights:
- Statistical analysis methodologies for business intelligence
- Key performance indicator (KPI) tracking and optimization
- Predictive analytics for forecasting and planning
- Data visualization techniques for stakeholder communication

Implementation Strategies:
- Project management methodologies including Agile and Waterfall
- Change management frameworks for organizational transformation
- Risk assessment and mitigation strategies
- Performance measurement systems with accountability structures

SUPPORTING RESEARCH AND EVIDENCE:
- Quantitative results from industry surveys and studies
- Qualitative insights from expert interviews and focus groups
- Benchmarking data comparing industry standards
- Case studies with outcome measurements and lessons learned

PRACTICAL APPLICATIONS:
The document provides frameworks for professional decision-making, including step-by-step implementation guides, cost-benefit analysis templates and performance monitoring systems."""

CONTENT: Mapping[str, str] = {
    "software_engineering": SOFTWARE_ENGINEERING_CONTENT,
    "research": RESEARCH_CONTENT,
    "policy": POLICY_CONTENT,
}

QUICK_SUMMARIES: Mapping[str, str] = {
    "software_engineering": (
        "Educational material covering software engineering design patterns, "
        "architectural principles, and development best practices."
    ),
    "research": (
        "Research document analyzing technology adoption trends with statistical data "
        "and strategic recommendations."
    ),
    "policy": (
        "Organizational policy document establishing governance frameworks, compliance "
        "requirements, and operational procedures."
    ),
    "general": (
        "Professional document containing strategic analysis, methodologies, and "
        "implementation frameworks for business applications."
    ),
}


class SummaryProfile(NamedTuple):
    summary: str
    key_points: Sequence[str]
    topics: Sequence[str]


SUMMARY_PROFILES: Mapping[str, SummaryProfile] = {
    "software_engineering": SummaryProfile(
        summary=(
            "Educational document covering software engineering principles, design patterns, "
            "and architectural concepts essential for modern development practices."
        ),
        key_points=(
            "Coverage of creational, structural, and behavioral design patterns",
            "Explanation of software architecture patterns including MVC and microservices",
            "SOLID principles and practices for maintainable code design",
            "UML modeling techniques and quality assurance methodologies",
        ),
        topics=("Software Engineering", "Design Patterns", "Architecture", "Quality Assurance"),
    ),
    "research": SummaryProfile(
        summary=(
            "Research document presenting an analysis of technology adoption trends with "
            "statistical evidence and strategic recommendations for organizations."
        ),
        key_points=(
            "Statistical analysis showing 78% efficiency improvement through automation",
            "Machine learning implementations demonstrate 15-25% average ROI",
            "Data-driven decision making is critical for competitive advantage",
            "Strategic recommendations for gradual technology integration",
        ),
        topics=("Technology Research", "Industry Analysis", "Digital Transformation", "Performance Metrics"),
    ),
    "policy": SummaryProfile(
        summary=(
            "Organizational policy document establishing guidelines for governance, "
            "compliance, and operational excellence across all business units."
        ),
        key_points=(
            "Mandatory governance framework with clear decision-making hierarchies",
            "Risk management protocols with quarterly assessment requirements",
            "Human resources policies covering conduct and performance standards",
            "Technology and security protocols ensuring data protection compliance",
        ),
        topics=("Organizational Policy", "Compliance", "Risk Management", "Governance"),
    ),
    "general": SummaryProfile(
        summary=(
            "Professional document providing analysis and strategic frameworks relevant "
            "to business and academic research applications."
        ),
        key_points=(
            "Strategic analysis methodologies with practical implementation guidance",
            "Evidence-based findings supported by quantitative and qualitative research",
            "Performance measurement frameworks for accountability and optimization",
            "Industry practices with real-world application examples",
        ),
        topics=("Business Analysis", "Strategic Planning", "Performance Management", "Best Practices"),
    ),
}

# app/roadmap/templates.py
"""Static roadmap templates by career category."""

TEMPLATES: dict[str, list[dict]] = {
    "ml-engineer": [
        {"name": "Python & Math Foundations", "description": "Master Python programming and linear algebra basics", "type": "course", "duration": "4 weeks"},
        {"name": "Machine Learning Fundamentals", "description": "Learn supervised and unsupervised learning algorithms", "type": "course", "duration": "6 weeks"},
        {"name": "Build a Classification Model", "description": "Create an end-to-end ML project with real data", "type": "project", "duration": "2 weeks"},
        {"name": "Deep Learning & Neural Networks", "description": "Master PyTorch or TensorFlow frameworks", "type": "skill", "duration": "6 weeks"},
        {"name": "Deploy ML Model to Production", "description": "Build and deploy a model API with MLOps practices", "type": "project", "duration": "3 weeks"},
        {"name": "Complete First ML Role", "description": "Apply to ML positions and land your first role", "type": "milestone", "duration": "4 weeks"},
    ],
    "data-scientist": [
        {"name": "Statistics & Probability", "description": "Build a strong foundation in statistical analysis", "type": "course", "duration": "4 weeks"},
        {"name": "Data Analysis with Python", "description": "Master pandas, numpy, and data visualization", "type": "skill", "duration": "4 weeks"},
        {"name": "Exploratory Data Analysis Project", "description": "Analyze a real-world dataset and present insights", "type": "project", "duration": "2 weeks"},
        {"name": "Machine Learning for Data Science", "description": "Learn predictive modeling and feature engineering", "type": "course", "duration": "6 weeks"},
        {"name": "End-to-End Data Science Project", "description": "Complete a full DS project from data to insights", "type": "project", "duration": "3 weeks"},
        {"name": "First Data Science Position", "description": "Apply and interview for DS roles", "type": "milestone", "duration": "4 weeks"},
    ],
    "frontend-developer": [
        {"name": "HTML, CSS & JavaScript Mastery", "description": "Build strong fundamentals in web technologies", "type": "course", "duration": "6 weeks"},
        {"name": "React Fundamentals", "description": "Learn component-based architecture and hooks", "type": "skill", "duration": "4 weeks"},
        {"name": "Build a Portfolio Website", "description": "Create a responsive personal portfolio", "type": "project", "duration": "2 weeks"},
        {"name": "Advanced React & TypeScript", "description": "Master state management and type safety", "type": "skill", "duration": "4 weeks"},
        {"name": "Full-Stack Web Application", "description": "Build a complete web app with authentication", "type": "project", "duration": "4 weeks"},
        {"name": "Land Frontend Role", "description": "Apply to frontend developer positions", "type": "milestone", "duration": "4 weeks"},
    ],
    "product-manager": [
        {"name": "Product Management Fundamentals", "description": "Learn product lifecycle and stakeholder management", "type": "course", "duration": "4 weeks"},
        {"name": "User Research & Discovery", "description": "Master user interviews and problem validation", "type": "skill", "duration": "3 weeks"},
        {"name": "Write Your First PRD", "description": "Create a comprehensive product requirements document", "type": "project", "duration": "2 weeks"},
        {"name": "Agile & Scrum Methodologies", "description": "Learn sprint planning and backlog management", "type": "skill", "duration": "3 weeks"},
        {"name": "Lead a Product Launch", "description": "Plan and execute a product launch strategy", "type": "project", "duration": "4 weeks"},
        {"name": "First PM Position", "description": "Interview and land your first PM role", "type": "milestone", "duration": "4 weeks"},
    ],
    "default": [
        {"name": "Foundation Building", "description": "Learn core concepts and fundamentals", "type": "course", "duration": "4 weeks"},
        {"name": "Skill Development", "description": "Build practical skills through hands-on practice", "type": "skill", "duration": "4 weeks"},
        {"name": "First Project", "description": "Apply your knowledge in a real project", "type": "project", "duration": "3 weeks"},
        {"name": "Advanced Topics", "description": "Deepen expertise in specialized areas", "type": "skill", "duration": "4 weeks"},
        {"name": "Portfolio Project", "description": "Build a showcase project for your portfolio", "type": "project", "duration": "3 weeks"},
        {"name": "Career Transition", "description": "Apply to positions and land your first role", "type": "milestone", "duration": "4 weeks"},
    ],
}

def select_template(career_id: str, career_name: str) -> tuple[str, list[dict]]:
    cid, cname = career_id.lower(), career_name.lower()
    for key, phases in TEMPLATES.items():
        if key in cid or key.replace("-", " ") in cname:
            return key, phases
    return "default", TEMPLATES["default"]

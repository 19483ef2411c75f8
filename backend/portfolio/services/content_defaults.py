"""Seed payloads written the first time a singleton document is read."""

DEFAULT_HERO = {
    "name": "Md. Riazul Islam",
    "rotatingTexts": [
        {"id": "1", "text": "Programmer"},
        {"id": "2", "text": "Problem Solver"},
        {"id": "3", "text": "Full Stack Web Developer"},
        {"id": "4", "text": "MERN Stack Web Developer"},
        {"id": "5", "text": "Photography Lover"},
    ],
    "description": (
        "I design and develop services for customers of all sizes, specializing in creating stylish, "
        "modern websites, web services and online stores."
    ),
    "profileImage": "/images/home/profile.jpg",
    "cvDownloadUrl": "#",
    "techIcons": [
        {"id": "1", "src": "https://img.icons8.com/color/48/000000/c-plus-plus-logo.png", "title": "C++"},
        {"id": "2", "src": "https://img.icons8.com/color/48/000000/python--v1.png", "title": "Python"},
        {"id": "3", "src": "https://img.icons8.com/color/48/000000/javascript--v1.png", "title": "JavaScript"},
        {"id": "4", "src": "/images/home/react.svg", "title": "React"},
        {"id": "5", "src": "https://img.icons8.com/fluency/48/000000/node-js.png", "title": "NodeJS"},
        {"id": "6", "src": "https://img.icons8.com/color/48/000000/html-5--v1.png", "title": "HTML5"},
        {"id": "7", "src": "https://img.icons8.com/color/48/000000/css3.png", "title": "CSS3"},
        {"id": "8", "src": "https://img.icons8.com/color/48/000000/mysql-logo.png", "title": "MySQL"},
    ],
}

DEFAULT_ABOUT = {
    "myself": {
        "title": "Myself",
        "description": [
            "Hello! I'm <strong>Md. Riazul Islam</strong> a self-taught & passionate "
            "<strong>Programmer & Full Stack Web Developer</strong>.",
            "As an enthusiastic programmer, I enjoy solving various challenges and I am committed to my work.",
        ],
    },
    "skills": {
        "title": "Skills",
        "categories": [
            {
                "id": "category-1",
                "name": "Technical Skills",
                "items": [
                    {"id": "skill-1", "name": "Programming Language", "description": "C++, Python, JavaScript"},
                    {"id": "skill-2", "name": "Problem Solving", "description": "C++"},
                    {"id": "skill-3", "name": "Version Control", "description": "Git, Github"},
                ],
            },
            {
                "id": "category-2",
                "name": "Web & Mobile",
                "items": [
                    {"id": "skill-4", "name": "Frontend", "description": "React, Next.js, Tailwind CSS"},
                    {"id": "skill-5", "name": "Backend", "description": "Node.js, Express.js, MongoDB"},
                ],
            },
        ],
    },
}


def _skills(category: str, *entries):
    return [
        {"id": skill_id, "name": name, "percentage": percentage, "category": category}
        for skill_id, name, percentage in entries
    ]


DEFAULT_EXPERTISE = {
    "title": "Expertise",
    "subtitle": "Skills Set",
    "categories": [
        {
            "id": "programming",
            "name": "Programming Languages",
            "skills": _skills(
                "programming",
                ("cpp", "C++", 90),
                ("python", "Python", 70),
                ("javascript", "JavaScript", 85),
                ("typescript", "TypeScript", 80),
            ),
        },
        {
            "id": "frontend",
            "name": "Frontend Development",
            "skills": _skills(
                "frontend",
                ("react", "React", 90),
                ("nextjs", "Next.js", 85),
                ("html", "HTML5", 95),
                ("css", "CSS3", 90),
                ("tailwind", "Tailwind CSS", 85),
            ),
        },
        {
            "id": "backend",
            "name": "Backend Development",
            "skills": _skills(
                "backend",
                ("nodejs", "Node.js", 80),
                ("express", "Express.js", 75),
                ("mongodb", "MongoDB", 85),
                ("mysql", "MySQL", 70),
            ),
        },
        {
            "id": "tools",
            "name": "Tools & Technologies",
            "skills": _skills(
                "tools",
                ("git", "Git", 85),
                ("github", "GitHub", 90),
                ("vscode", "VS Code", 95),
                ("figma", "Figma", 70),
            ),
        },
    ],
}

DEFAULT_NAVIGATION = {
    "navigationLinks": [
        {"id": "1", "label": "Home", "href": "#home", "order": 1, "isActive": True},
        {"id": "2", "label": "About", "href": "#about", "order": 2, "isActive": True},
        {"id": "3", "label": "Expertise", "href": "#expertise", "order": 3, "isActive": True},
        {"id": "4", "label": "Projects", "href": "#projects", "order": 4, "isActive": True},
        {"id": "5", "label": "Contact", "href": "#contact", "order": 5, "isActive": True},
    ],
    "socialLinks": [
        {
            "id": "1",
            "href": "https://www.facebook.com/imriaz.cu/",
            "icon": "Facebook",
            "iconType": "lucide",
            "label": "Facebook",
            "order": 1,
            "isActive": True,
        },
        {
            "id": "2",
            "href": "https://www.linkedin.com/in/md-riazul-islam-891b65194/",
            "icon": "Linkedin",
            "iconType": "lucide",
            "label": "LinkedIn",
            "order": 2,
            "isActive": True,
        },
        {
            "id": "3",
            "href": "https://github.com/Riaz-404",
            "icon": "Github",
            "iconType": "lucide",
            "label": "GitHub",
            "order": 3,
            "isActive": True,
        },
    ],
}

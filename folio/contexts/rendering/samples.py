"""Bundled sample resume used for skin previews."""

SAMPLE_RESUME_TEXT = """Senior Software Engineer
John Doe
john.doe@example.com
+1 (555) 123-4567
San Francisco, CA

Summary:
Experienced software engineer with 8+ years of expertise in full-stack development, cloud architecture, and team leadership. Proven track record of delivering scalable applications and driving technical innovation.

Technical Skills:
• Languages: JavaScript, TypeScript, Python, Java
• Frontend: React, Next.js, Vue.js, HTML5, CSS3
• Backend: Node.js, Express, FastAPI, Django
• Cloud: AWS, Azure, Docker, Kubernetes
• Databases: PostgreSQL, MongoDB, Redis
• Tools: Git, CI/CD, Agile, TDD

Professional Experience:
Senior Software Engineer at Tech Corp: 01/2020 – Present
• Led development of microservices architecture serving 1M+ users, improving system reliability by 40%
• Architected and implemented real-time data processing pipeline using Node.js and Redis
• Mentored team of 5 engineers, establishing best practices and code review processes
• Optimized database queries reducing API response time by 50% and cutting infrastructure costs by 30%
• Implemented CI/CD pipelines using GitHub Actions, reducing deployment time from 2 hours to 15 minutes
• Collaborated with product and design teams to deliver user-facing features with 95% customer satisfaction
• Designed and developed RESTful APIs handling 10K+ requests per minute with 99.9% uptime
• Built responsive frontend components using React and TypeScript, improving page load times by 35%

Software Engineer at StartupXYZ: 06/2017 – 12/2019
• Developed customer-facing web applications using React and Node.js, increasing user engagement by 60%
• Built automated testing suite achieving 85% code coverage and reducing production bugs by 45%
• Integrated third-party payment APIs and implemented secure authentication systems
• Refactored legacy codebase improving maintainability and reducing technical debt by 50%
• Participated in agile sprints, delivering features on time with high quality standards

Education:
BS in Computer Science – University of California: 2013 – 2017
"""

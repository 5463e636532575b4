"""Reply text bundles per language.

German, French and Italian conversations are answered from the English
bundle until dedicated translations exist.
"""

from __future__ import annotations

from typing import Any, Dict

TEMPLATES: Dict[str, Dict[str, Any]] = {
    "en": {
        "greeting": "Hello! I'm your CV and cover letter assistant.",
        "greeting_named": "Hello {name}, good to hear from you.",
        "menu": (
            "Here is what I can help you with:\n"
            "- Building a CV from scratch or polishing the one you have\n"
            "- Writing a cover letter tailored to a specific role\n"
            "- Preparing for interviews\n"
            "- Career, skills and salary questions\n"
            "Tell me a little about yourself and what you are working on."
        ),
        "general_help": "Happy to help with that. Career documents work best when they tell one clear story.",
        "cv_help": "Let's work on your CV.",
        "letter_help": "Let's write a cover letter that gets noticed.",
        "interview_help": "Let's get you ready for the interview.",
        "cv_guidance": {
            "entry": (
                "For an early-career CV, lead with education, projects and internships. "
                "Keep it to one page and show what you achieved, not only what you studied."
            ),
            "mid": (
                "For a mid-level CV, put your recent experience first and quantify results "
                "(revenue, time saved, team size). Two pages is the limit."
            ),
            "senior": (
                "For an executive CV, open with a leadership summary, then strategic outcomes: "
                "P&L ownership, transformations led, and the size of the teams you ran."
            ),
        },
        "cv_framework": (
            "A strong CV follows this order:\n"
            "1. Contact details and a short professional summary\n"
            "2. Work experience, newest first, with measurable achievements\n"
            "3. Key skills matched to the roles you want\n"
            "4. Education and certifications"
        ),
        "cv_checklist": (
            "Quick optimisation checklist:\n"
            "- Start each bullet with an action verb\n"
            "- Add numbers to at least half of your achievements\n"
            "- Mirror keywords from the job advert\n"
            "- Remove anything older than fifteen years unless it is essential"
        ),
        "letter_guide": (
            "A good cover letter has three parts:\n"
            "1. Why this company and this role caught your attention\n"
            "2. Two or three achievements that prove you can do the job\n"
            "3. A confident close asking for a conversation"
        ),
        "letter_tips": (
            "Cover letter tips:\n"
            "- Address a named person whenever you can\n"
            "- Keep it under one page\n"
            "- Never repeat your CV line by line; tell the story behind it"
        ),
        "letter_target": "I'll address the letter to the hiring team at {company} for the {position} role.",
        "interview_guide": (
            "Interview preparation:\n"
            "1. Research the company, its products and recent news\n"
            "2. Prepare STAR stories (Situation, Task, Action, Result)\n"
            "3. Have two or three questions ready for the interviewer"
        ),
        "industry_insights": {
            "technology": "In technology, hiring managers look for shipped projects and the stack you used.",
            "finance": "In finance, accuracy and regulatory awareness matter as much as results.",
            "healthcare": "In healthcare, registrations, patient outcomes and compliance carry the most weight.",
            "marketing": "In marketing, campaign metrics such as reach, conversion and ROI speak loudest.",
            "legal": "In legal roles, practice areas, notable matters and admissions should be easy to find.",
            "education": "In education, highlight learner outcomes and the curricula you have delivered.",
        },
        "profile_ack": "Here is what I have noted so far: {details}.",
        "profile_fields": {
            "name": "name {value}",
            "email": "email {value}",
            "phone": "phone {value}",
            "company": "employer {value}",
            "position": "role {value}",
            "skills": "skills {value}",
        },
        "ready_cv": "You have shared enough for a first CV draft. Ask me to generate the PDF whenever you are ready.",
        "ready_letter": "I have enough to draft your cover letter. Ask me to generate the PDF whenever you like.",
        "ready_both": "I have enough for both a CV and a cover letter. Just say which PDF you want first.",
        "web_heading": "Current market notes:",
        "closing_questions": [
            "What would you like to work on next?",
            "Shall we keep going with the next section?",
            "Is there a specific role you are aiming for?",
        ],
        "follow_ups": {
            "cv_creation": [
                "Tell me about your most recent job",
                "Which skills do you want to highlight?",
                "What is your highest qualification?",
            ],
            "letter_creation": [
                "Which company are you applying to?",
                "What is the job title?",
                "Why do you want this role?",
            ],
            "career_advice": [
                "Where do you see yourself in five years?",
                "Which industries interest you?",
                "What do you enjoy most in your current role?",
            ],
            "skill_development": [
                "Which skill do you want to build first?",
                "Do you prefer courses or hands-on projects?",
                "What roles are you preparing for?",
            ],
            "salary_negotiation": [
                "What is your current salary range?",
                "Have you received an offer yet?",
                "Which benefits matter most to you?",
            ],
            "general_inquiry": [
                "Help me write a CV",
                "Help me write a cover letter",
                "Prepare me for an interview",
            ],
        },
        "missing_questions": {
            "name": "What is your full name?",
            "contact": "What email address should appear on your documents?",
            "experience": "Which industry do you work in, and what was your most recent role?",
            "skills": "What are your strongest skills?",
            "education": "What is your highest qualification?",
        },
        "fallback": "Sorry, I lost my train of thought for a moment. Could you tell me again what you need?",
    },
    "pt": {
        "greeting": "Olá! Sou seu assistente de currículo e carta de apresentação.",
        "greeting_named": "Olá {name}, que bom falar com você.",
        "menu": (
            "Posso ajudar você com:\n"
            "- Criar um currículo do zero ou melhorar o atual\n"
            "- Escrever uma carta de apresentação para uma vaga específica\n"
            "- Preparação para entrevistas\n"
            "- Dúvidas sobre carreira, habilidades e salário\n"
            "Conte um pouco sobre você e o que precisa."
        ),
        "general_help": "Com prazer. Documentos de carreira funcionam melhor quando contam uma história clara.",
        "cv_help": "Vamos trabalhar no seu currículo.",
        "letter_help": "Vamos escrever uma carta de apresentação que chame atenção.",
        "interview_help": "Vamos preparar você para a entrevista.",
        "cv_guidance": {
            "entry": (
                "Para quem está começando, destaque formação, projetos e estágios. "
                "Mantenha uma página e mostre resultados, não apenas o que estudou."
            ),
            "mid": (
                "Para um currículo de nível pleno, coloque a experiência recente primeiro e "
                "quantifique resultados. Duas páginas no máximo."
            ),
            "senior": (
                "Para um currículo executivo, comece com um resumo de liderança e resultados "
                "estratégicos: equipes lideradas, transformações e orçamento sob sua gestão."
            ),
        },
        "cv_framework": (
            "Um bom currículo segue esta ordem:\n"
            "1. Contato e um resumo profissional curto\n"
            "2. Experiência, da mais recente para a mais antiga, com conquistas mensuráveis\n"
            "3. Habilidades alinhadas às vagas desejadas\n"
            "4. Formação e certificações"
        ),
        "cv_checklist": (
            "Checklist rápido:\n"
            "- Comece cada item com um verbo de ação\n"
            "- Use números em pelo menos metade das conquistas\n"
            "- Repita palavras-chave do anúncio da vaga\n"
            "- Remova o que não for relevante para a vaga"
        ),
        "letter_guide": (
            "Uma boa carta de apresentação tem três partes:\n"
            "1. Por que esta empresa e esta vaga chamaram sua atenção\n"
            "2. Duas ou três conquistas que provam sua capacidade\n"
            "3. Um encerramento confiante pedindo uma conversa"
        ),
        "letter_tips": (
            "Dicas para a carta:\n"
            "- Dirija-se a uma pessoa pelo nome sempre que possível\n"
            "- Mantenha menos de uma página\n"
            "- Não repita o currículo; conte a história por trás dele"
        ),
        "letter_target": "Vou endereçar a carta à equipe de recrutamento da {company} para a vaga de {position}.",
        "interview_guide": (
            "Preparação para entrevista:\n"
            "1. Pesquise a empresa, seus produtos e notícias recentes\n"
            "2. Prepare histórias no formato STAR (Situação, Tarefa, Ação, Resultado)\n"
            "3. Tenha duas ou três perguntas para o entrevistador"
        ),
        "industry_insights": {
            "technology": "Em tecnologia, recrutadores procuram projetos entregues e as ferramentas usadas.",
            "finance": "Em finanças, precisão e conhecimento regulatório pesam tanto quanto resultados.",
            "healthcare": "Na saúde, registros profissionais e resultados com pacientes têm mais peso.",
            "marketing": "Em marketing, métricas de campanha como alcance e conversão falam mais alto.",
            "legal": "Na área jurídica, destaque áreas de atuação e casos relevantes.",
            "education": "Na educação, destaque resultados dos alunos e currículos que você aplicou.",
        },
        "profile_ack": "Até agora anotei: {details}.",
        "profile_fields": {
            "name": "nome {value}",
            "email": "email {value}",
            "phone": "telefone {value}",
            "company": "empresa {value}",
            "position": "cargo {value}",
            "skills": "habilidades {value}",
        },
        "ready_cv": "Você já compartilhou o suficiente para um primeiro currículo. Peça o PDF quando quiser.",
        "ready_letter": "Já tenho o suficiente para a sua carta de apresentação. Peça o PDF quando quiser.",
        "ready_both": "Já tenho o suficiente para o currículo e a carta. Diga qual PDF prefere primeiro.",
        "web_heading": "Notas atuais do mercado:",
        "closing_questions": [
            "No que você gostaria de trabalhar agora?",
            "Vamos seguir para a próxima seção?",
            "Existe uma vaga específica que você está buscando?",
        ],
        "follow_ups": {
            "cv_creation": [
                "Fale sobre seu emprego mais recente",
                "Quais habilidades você quer destacar?",
                "Qual é a sua formação mais alta?",
            ],
            "letter_creation": [
                "Para qual empresa você está se candidatando?",
                "Qual é o cargo?",
                "Por que você quer esta vaga?",
            ],
            "career_advice": [
                "Onde você se vê em cinco anos?",
                "Quais setores interessam a você?",
                "O que você mais gosta no seu trabalho atual?",
            ],
            "skill_development": [
                "Qual habilidade você quer desenvolver primeiro?",
                "Prefere cursos ou projetos práticos?",
                "Para quais cargos você está se preparando?",
            ],
            "salary_negotiation": [
                "Qual é a sua faixa salarial atual?",
                "Você já recebeu uma proposta?",
                "Quais benefícios são mais importantes para você?",
            ],
            "general_inquiry": [
                "Me ajude a criar um currículo",
                "Me ajude a escrever uma carta de apresentação",
                "Me prepare para uma entrevista",
            ],
        },
        "missing_questions": {
            "name": "Qual é o seu nome completo?",
            "contact": "Qual email deve aparecer nos seus documentos?",
            "experience": "Em qual setor você trabalha e qual foi seu cargo mais recente?",
            "skills": "Quais são suas principais habilidades?",
            "education": "Qual é a sua formação mais alta?",
        },
        "fallback": "Desculpe, me perdi por um momento. Pode me contar de novo o que precisa?",
    },
    "es": {
        "greeting": "¡Hola! Soy tu asistente de currículum y carta de presentación.",
        "greeting_named": "Hola {name}, qué gusto saludarte.",
        "menu": (
            "Puedo ayudarte con:\n"
            "- Crear un currículum desde cero o mejorar el actual\n"
            "- Escribir una carta de presentación para un puesto concreto\n"
            "- Preparar entrevistas\n"
            "- Preguntas sobre carrera, habilidades y salario\n"
            "Cuéntame un poco sobre ti y lo que necesitas."
        ),
        "general_help": "Con gusto. Los documentos profesionales funcionan mejor cuando cuentan una historia clara.",
        "cv_help": "Trabajemos en tu currículum.",
        "letter_help": "Escribamos una carta de presentación que destaque.",
        "interview_help": "Preparémonos para la entrevista.",
        "cv_guidance": {
            "entry": (
                "Si estás empezando, destaca tu formación, proyectos y prácticas. "
                "Una página es suficiente; muestra logros, no solo estudios."
            ),
            "mid": (
                "Para un perfil intermedio, pon primero la experiencia reciente y cuantifica "
                "los resultados. Dos páginas como máximo."
            ),
            "senior": (
                "Para un currículum ejecutivo, empieza con un resumen de liderazgo y resultados "
                "estratégicos: equipos dirigidos, transformaciones y presupuesto gestionado."
            ),
        },
        "cv_framework": (
            "Un buen currículum sigue este orden:\n"
            "1. Contacto y un breve resumen profesional\n"
            "2. Experiencia, de la más reciente a la más antigua, con logros medibles\n"
            "3. Habilidades alineadas con los puestos que buscas\n"
            "4. Formación y certificaciones"
        ),
        "cv_checklist": (
            "Lista rápida de mejora:\n"
            "- Empieza cada punto con un verbo de acción\n"
            "- Usa cifras en al menos la mitad de tus logros\n"
            "- Repite las palabras clave de la oferta\n"
            "- Elimina lo que no aporte al puesto"
        ),
        "letter_guide": (
            "Una buena carta de presentación tiene tres partes:\n"
            "1. Por qué te interesa esta empresa y este puesto\n"
            "2. Dos o tres logros que demuestran tu capacidad\n"
            "3. Un cierre seguro pidiendo una conversación"
        ),
        "letter_tips": (
            "Consejos para la carta:\n"
            "- Dirígete a una persona por su nombre siempre que puedas\n"
            "- Mantén la carta en menos de una página\n"
            "- No repitas el currículum; cuenta la historia detrás"
        ),
        "letter_target": "Dirigiré la carta al equipo de selección de {company} para el puesto de {position}.",
        "interview_guide": (
            "Preparación de la entrevista:\n"
            "1. Investiga la empresa, sus productos y noticias recientes\n"
            "2. Prepara historias STAR (Situación, Tarea, Acción, Resultado)\n"
            "3. Ten dos o tres preguntas para el entrevistador"
        ),
        "industry_insights": {
            "technology": "En tecnología, los reclutadores buscan proyectos entregados y las herramientas usadas.",
            "finance": "En finanzas, la precisión y el conocimiento regulatorio pesan tanto como los resultados.",
            "healthcare": "En salud, las colegiaciones y los resultados con pacientes son lo más valorado.",
            "marketing": "En marketing, las métricas de campaña como alcance y conversión pesan más.",
            "legal": "En el ámbito legal, destaca tus áreas de práctica y los casos relevantes.",
            "education": "En educación, destaca los resultados de tus alumnos y los programas que impartiste.",
        },
        "profile_ack": "Hasta ahora he anotado: {details}.",
        "profile_fields": {
            "name": "nombre {value}",
            "email": "email {value}",
            "phone": "teléfono {value}",
            "company": "empresa {value}",
            "position": "puesto {value}",
            "skills": "habilidades {value}",
        },
        "ready_cv": "Ya compartiste lo suficiente para un primer currículum. Pídeme el PDF cuando quieras.",
        "ready_letter": "Ya tengo lo suficiente para tu carta de presentación. Pídeme el PDF cuando quieras.",
        "ready_both": "Ya tengo lo suficiente para el currículum y la carta. Dime qué PDF quieres primero.",
        "web_heading": "Notas actuales del mercado:",
        "closing_questions": [
            "¿En qué te gustaría trabajar ahora?",
            "¿Seguimos con la siguiente sección?",
            "¿Buscas algún puesto en concreto?",
        ],
        "follow_ups": {
            "cv_creation": [
                "Háblame de tu trabajo más reciente",
                "¿Qué habilidades quieres destacar?",
                "¿Cuál es tu formación más alta?",
            ],
            "letter_creation": [
                "¿A qué empresa te postulas?",
                "¿Cuál es el puesto?",
                "¿Por qué quieres este puesto?",
            ],
            "career_advice": [
                "¿Dónde te ves en cinco años?",
                "¿Qué sectores te interesan?",
                "¿Qué es lo que más disfrutas de tu trabajo actual?",
            ],
            "skill_development": [
                "¿Qué habilidad quieres desarrollar primero?",
                "¿Prefieres cursos o proyectos prácticos?",
                "¿Para qué puestos te estás preparando?",
            ],
            "salary_negotiation": [
                "¿Cuál es tu rango salarial actual?",
                "¿Ya recibiste una oferta?",
                "¿Qué beneficios son más importantes para ti?",
            ],
            "general_inquiry": [
                "Ayúdame a crear un currículum",
                "Ayúdame a escribir una carta de presentación",
                "Prepárame para una entrevista",
            ],
        },
        "missing_questions": {
            "name": "¿Cuál es tu nombre completo?",
            "contact": "¿Qué email debe aparecer en tus documentos?",
            "experience": "¿En qué sector trabajas y cuál fue tu puesto más reciente?",
            "skills": "¿Cuáles son tus principales habilidades?",
            "education": "¿Cuál es tu formación más alta?",
        },
        "fallback": "Perdona, me he perdido un momento. ¿Puedes contarme otra vez lo que necesitas?",
    },
}

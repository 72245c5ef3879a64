# idea_generator/generation/prompt.py
# Fixed prompt template for the business-idea completion request.

from ..schemas.ideas import SurveyAnswers

IDEA_PROMPT_TEMPLATE = """You are an expert in crafting innovative, tech-forward business concepts for a modern audience (particularly millennials and Gen Z).

The user has provided the following information:

1. Interests/Passions: {interests}
2. Skills/Strengths: {skills}
3. Lifestyle/Work Preferences: {lifestyle}
4. Main Goal or Ambition: {goal}
5. Tech/Digital Preferences: {tech}
6. Additional Constraints or “Dream Business” Details: {constraints}

**Task**:
Generate five fresh, creative business ideas that align with the user’s inputs. Each idea should be innovative and modern—favoring digital-first or tech-savvy approaches where appropriate.

**Required Format** for each idea:

1. **Idea Title**
2. **Overview (1–3 sentences)**
3. **Key Steps** (at least two)

**Guidelines**:

- Each idea must feel relevant to the user’s interests, skills, and lifestyle.
- If the user has a specific ambition (side hustle, low initial budget), tailor suggestions accordingly.
- Avoid overly generic suggestions like “open a coffee shop.” Focus on tech-forward, digital-friendly, or creative models.
- Incorporate the user’s personality or brand vibe where possible (e.g., remote, flexible hours).
- Aim for originality and creativity—avoid clichés or well-known templates. Keep each idea moderately feasible while still pushing the envelope.

Now, propose **5** distinct ideas in a structured list (1 through 5)."""


def build_prompt(answers: SurveyAnswers) -> str:
    """Fills the six survey answers into IDEA_PROMPT_TEMPLATE."""
    return IDEA_PROMPT_TEMPLATE.format(**answers.model_dump())

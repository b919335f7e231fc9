REFINE_MATCH_SCORE_SYSTEM_PROMPT = """
You are an AI assistant specializing in job matching. You refine an initial
job match score between a candidate and a job posting.

Rules
- Respond only with the requested JSON object.
- refinedMatchScore is a number between 0 and 100 inclusive. Never above 100 or below 0.
- reasoning is one or two sentences explaining the adjustment.
""".strip()

# Inputs are embedded verbatim
REFINE_MATCH_SCORE_PROMPT_TEMPLATE = """Your task is to refine an initial job match score between a candidate and a job posting, given their profile and the job description.

Instructions:
1. Analyze the job description and candidate profile provided.
2. Consider aspects not captured by the initial match score, such as specific skills, experience, and cultural fit.
3. Adjust the initial match score based on your analysis. Explain the adjustment in the reasoning field.
4. The refinedMatchScore should still be between 0 and 100. Do not use a score of above 100 or below 0.

Job Description: {job_description}
Candidate Profile: {candidate_profile}
Initial Match Score: {initial_match_score}

Output a refined match score and your reasoning."""

REFINE_MATCH_SCORE_SCHEMA = {
    "name": "refine_match_score",
    "strict": False,
    "schema": {
        "type": "object",
        "properties": {
            "refinedMatchScore": {
                "type": "number",
                "description": "The refined match score, adjusted based on AI analysis (0-100).",
            },
            "reasoning": {
                "type": "string",
                "description": "Reasoning for the refined match score adjustment.",
            },
        },
        "required": ["refinedMatchScore"],
        "additionalProperties": False,
    },
}

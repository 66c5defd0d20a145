"""Prompt templates sent to the AI advice service"""

SYSTEM_PROMPT = """
You are a careful, pragmatic decision advisor.
Answer in the same language the user wrote the decision context in.
Be concrete, weigh trade-offs honestly and never invent facts the user did not give you.
"""

YES_NO_PROMPT = """
Given the decision context below, help the user decide between "yes" and "no".
The answer must be formatted as Markdown.

Context: {context}

List the main arguments for "yes" and for "no", then give a clear recommendation.
Use lists and bold text to structure the answer.
"""

MULTIPLE_CHOICE_PROMPT = """
Given the decision context and the options below, give advice to help choose the best option.
The answer must be formatted as Markdown.

Context: {context}

Options:
{options}

Analyse the pros and cons of each option based on the descriptions given and give a clear recommendation.
Use lists and bold text to structure the answer.
"""

FINANCIAL_SPENDING_PROMPT = """
The user is comparing buying through a **financing** (fixed-rate loan, Price amortization table)
against a **consortium** (pooled purchase with an administrative fee and no interest).
The answer must be formatted as Markdown.

Context: {context}

Financing:
- Asset value: {financing_value}
- Down payment: {down_payment}
- Monthly interest rate: {interest_rate}%
- Installments: {financing_installments}
- Estimated monthly payment: {financing_monthly}
- Estimated total cost: {financing_total}

Consortium:
- Credit value: {consortium_value}
- Administrative fee: {admin_fee}%
- Installments: {consortium_installments}
- Estimated monthly payment: {consortium_monthly}
- Estimated total cost: {consortium_total}

Compare total cost, monthly impact, time until the asset is available and risk.
Finish with a clear recommendation for the user's context.
"""

FINANCIAL_ANALYSIS_PROMPT = """
Given the decision context and the cost structure below, analyse the financial impact of the decision.
The answer must be formatted as Markdown.

Context: {context}

- Fixed cost: {fixed_cost}
- Variable cost: {variable_cost}

Explain how each cost component affects the decision and give a clear recommendation.
"""

WEIGHTED_SUGGESTIONS_PROMPT = """
You are an expert in decision analysis. Based on the context below, suggest 5 to 7 relevant
evaluation criteria and assign each one an integer percentage weight from 1 to 100.
The weights of all criteria must add up to exactly 100.

Decision context: {context}

For each criterion give a short Markdown rationale for including it and for its weight.
Reply ONLY with a JSON object in this format:
{{"suggestions": [{{"name": "Cost", "weight": 30, "rationale": "..."}}]}}
"""

FINANCIAL_WEIGHTS_PROMPT = """
You are a personal finance expert. Based on the financial decision context below, suggest 4 to 6
financial criteria (for example total cost, monthly impact, liquidity, risk) and assign each one an
integer percentage weight from 1 to 100. The weights of all criteria must add up to exactly 100.

Decision context: {context}

For each criterion give a short Markdown rationale for including it and for its weight.
Reply ONLY with a JSON object in this format:
{{"suggestions": [{{"name": "Total cost", "weight": 40, "rationale": "..."}}]}}
"""

WEIGHTED_ADVICE_PROMPT = """
The user scored each option against weighted criteria. Final scores were already computed
as the sum of score * weight / 100 for every criterion. Do not recompute them.
The answer must be formatted as Markdown.

Context: {context}

Criteria (weight %):
{criteria}

Options and scores:
{options}

Final weighted scores:
{results}

Explain what drives the ranking, point out close calls or criteria that dominate the result,
and give a clear recommendation.
"""

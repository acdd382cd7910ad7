"""Claims rejection analysis workflow.

A 4-step pipeline that:
1. Validates incoming claim records and resolves the active rule set
2. Categorizes rejected claims as medical or technical
3. Ranks rejection rules by estimated recoverable savings
4. Computes statistics, trends, comparisons and predictions into one result
"""

import logging
from datetime import date
from typing import Annotated, Any, Literal

from pydantic import BaseModel
from workflows import Context, Workflow, step
from workflows.events import Event, StartEvent, StopEvent
from workflows.resource import ResourceConfig

from .analyzers import (
    analyze_impact,
    build_analysis_result,
    classify_claims,
    filter_valid_claims,
    generate_training_suggestions,
)
from .config import RulesConfig
from .errors import EmptyDatasetError
from .rule_store import InMemoryRuleStore, build_rule_store
from .schemas import (
    Claim,
    InsuranceProvider,
    RejectionAnalysis,
    RejectionRule,
    TrainingSuggestion,
)

logger = logging.getLogger(__name__)


# --- Events ---


class AnalysisStartEvent(StartEvent):
    """Start event carrying the claim records to analyze.

    When ``rules`` is given it replaces the configured rule set for this run.
    """

    records: list[Claim | dict[str, Any]]
    rules: list[RejectionRule] | None = None
    providers: list[InsuranceProvider] = []
    as_of: date | None = None


class StatusEvent(Event):
    """Progress status update for the client."""

    message: str
    level: Literal["info", "warning", "error"] = "info"


class ClaimsLoadedEvent(Event):
    """Emitted after claim records are validated."""

    pass


class ClaimsClassifiedEvent(Event):
    """Emitted after rejected claims are categorized."""

    pass


class RulesAnalyzedEvent(Event):
    """Emitted after rule impact is ranked."""

    pass


# --- Workflow State ---


class WorkflowState(BaseModel):
    """State persisted across workflow steps."""

    as_of: date | None = None
    claims: list[Claim] = []
    rules: list[RejectionRule] = []
    providers: list[InsuranceProvider] = []
    rejection_analysis: list[RejectionAnalysis] = []
    training_suggestions: list[TrainingSuggestion] = []


# --- Workflow ---


class ClaimsAnalysisWorkflow(Workflow):
    """Categorize claim rejections and analyze the claim population."""

    @step()
    async def load_claims(
        self,
        event: AnalysisStartEvent,
        ctx: Context[WorkflowState],
        rules_config: Annotated[
            RulesConfig,
            ResourceConfig(
                config_file="configs/config.json",
                path_selector="rules",
                label="Rejection Rules",
                description="Built-in rule toggles, custom rules and provider-specific rules",
            ),
        ],
    ) -> ClaimsLoadedEvent:
        """Validate claim records, skipping invalid ones."""
        ctx.write_event_to_stream(
            StatusEvent(message=f"Validating {len(event.records)} claim records...")
        )

        claims = filter_valid_claims(event.records)
        skipped = len(event.records) - len(claims)
        if skipped:
            ctx.write_event_to_stream(
                StatusEvent(message=f"Skipped {skipped} invalid claims", level="warning")
            )
        if not claims:
            raise EmptyDatasetError("No valid claims to analyze")

        if event.rules is not None:
            rule_store = InMemoryRuleStore(rules=event.rules, providers=event.providers)
        else:
            rule_store = build_rule_store(rules_config)

        async with ctx.store.edit_state() as state:
            state.as_of = event.as_of or date.today()
            state.claims = claims
            state.rules = rule_store.rules
            state.providers = list(rule_store.providers.values())

        return ClaimsLoadedEvent()

    @step()
    async def classify(
        self,
        event: ClaimsLoadedEvent,
        ctx: Context[WorkflowState],
    ) -> ClaimsClassifiedEvent:
        """Categorize every rejected claim against the active rules."""
        state = await ctx.store.get_state()

        ctx.write_event_to_stream(StatusEvent(message="Categorizing rejected claims..."))

        rule_store = InMemoryRuleStore(rules=state.rules, providers=state.providers)
        claims = classify_claims(state.claims, rule_store)

        async with ctx.store.edit_state() as state:
            state.claims = claims

        return ClaimsClassifiedEvent()

    @step()
    async def analyze_rules(
        self,
        event: ClaimsClassifiedEvent,
        ctx: Context[WorkflowState],
    ) -> RulesAnalyzedEvent:
        """Rank rules by impact and derive training suggestions."""
        state = await ctx.store.get_state()

        rule_store = InMemoryRuleStore(rules=state.rules, providers=state.providers)
        active_rules = rule_store.all_active_rules()
        rejected = [c for c in state.claims if c.is_rejected]

        rejection_analysis = analyze_impact(rejected, active_rules)
        training_suggestions = generate_training_suggestions(rejection_analysis, active_rules)

        async with ctx.store.edit_state() as state:
            state.rejection_analysis = rejection_analysis
            state.training_suggestions = training_suggestions

        if rejection_analysis:
            top = rejection_analysis[0]
            ctx.write_event_to_stream(
                StatusEvent(
                    message=f"{len(rejection_analysis)} rules matched; top rule {top.rule_name} "
                    f"covers {len(top.matches)} claims"
                )
            )
        else:
            ctx.write_event_to_stream(
                StatusEvent(message="No rejection rules matched", level="warning")
            )

        return RulesAnalyzedEvent()

    @step()
    async def analyze_population(
        self,
        event: RulesAnalyzedEvent,
        ctx: Context[WorkflowState],
    ) -> StopEvent:
        """Compute statistics, trends, comparisons and predictions."""
        state = await ctx.store.get_state()

        ctx.write_event_to_stream(StatusEvent(message="Analyzing claim population..."))

        output = build_analysis_result(
            state.claims,
            state.rejection_analysis,
            state.training_suggestions,
            state.as_of,
        )

        ctx.write_event_to_stream(StatusEvent(message="Analysis complete"))

        return StopEvent(result=output)


workflow = ClaimsAnalysisWorkflow(timeout=None)

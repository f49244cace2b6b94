"""Repeated-record sections: where each lives and how its fields are renamed."""

from dataclasses import dataclass
from typing import Optional

from . import constants as c
from .blocks import FieldRenameMap


@dataclass(frozen=True)
class SectionSpec:
    """One repeated-record section of the bureau response."""

    name: str
    anchor: str
    data_key: Optional[str]
    fields: FieldRenameMap
    parent: Optional[str] = None

    @property
    def output_path(self) -> tuple[str, ...]:
        """Keys leading to this section in the serialized payload."""
        return (self.parent, self.name) if self.parent else (self.name,)


RISK_SCORE = SectionSpec(
    name="riskScore",
    anchor=c.SCORES,
    data_key=None,
    fields=(
        ("NOMESCORE", "scoreName"),
        ("SCORE", "points"),
        ("CLASSIFICACAOALFABETICA", "ratingClass"),
        ("TEXTO", "description"),
        ("DESCRICAONATUREZA", "type"),
    ),
)

DEBTS = SectionSpec(
    name="debts",
    anchor=c.DEBTS,
    data_key=c.DEBT,
    fields=(
        ("DATAOCORRENCIA", "date"),
        ("VALOR", "value"),
        ("INFORMANTE", "creditor"),
        ("CONTRATO", "contractId"),
    ),
    parent="negativeDetails",
)

PROTESTS = SectionSpec(
    name="protests",
    anchor=c.PROTESTS,
    data_key=c.PROTEST,
    fields=(
        ("DATAOCORRENCIA", "date"),
        ("VALOR", "value"),
        ("CIDADE", "city"),
        ("CARTORIO", "registryOffice"),
    ),
    parent="negativeDetails",
)

CIVIL_ACTIONS = SectionSpec(
    name="civilActions",
    anchor=c.CIVIL_ACTIONS,
    data_key=c.CIVIL_ACTION,
    fields=(
        ("DATADISTRIBUICAO", "distributionDate"),
        ("VALOR", "value"),
        ("ACAOCIVEL", "actionType"),
        ("AUTOR", "plaintiff"),
    ),
    parent="negativeDetails",
)

BANKRUPTCY = SectionSpec(
    name="bankruptcy",
    anchor=c.BANKRUPTCIES,
    data_key=c.BANKRUPTCY,
    fields=(
        ("RAZAOSOCIAL", "companyName"),
        ("TIPOOCORRENCIA", "type"),
        ("DATAOCORRENCIA", "date"),
    ),
    parent="negativeDetails",
)

CORPORATE_PARTICIPATION = SectionSpec(
    name="corporateParticipation",
    anchor=c.PARTICIPATIONS,
    data_key=c.PARTICIPATION,
    fields=(
        ("RAZAOSOCIAL", "companyName"),
        ("NUMERODOCUMENTOB", "cnpj"),
        ("FUNCAO", "role"),
        ("DATADEENTRADA", "entryDate"),
        ("VALOREMPERCENTUAL", "ownershipPercentage"),
    ),
)

NEGATIVE_SECTIONS: tuple[SectionSpec, ...] = (DEBTS, PROTESTS, CIVIL_ACTIONS, BANKRUPTCY)

ALL_SECTIONS: tuple[SectionSpec, ...] = (RISK_SCORE, *NEGATIVE_SECTIONS, CORPORATE_PARTICIPATION)

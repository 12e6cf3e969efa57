"""
===============================================================================
Mappers – host records (dicts) -> model objects
-------------------------------------------------------------------------------
Host records use the legacy camelCase Portuguese keys ("tipoDocumento",
"dataEnvio", "destinatariosData", ...); newer producers send snake_case
English keys. Both are accepted; the English key wins when both exist.

Leniency rules:
  - unknown subject          -> subject=None, raw text kept in subject_other
  - unparseable date         -> None (logged)
  - "no tracking" + code     -> code dropped (logged)
  - unknown document type    -> UnknownDocumentTypeError
===============================================================================
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, List, Mapping, Optional

from core.helpers.date_time_helper import is_blank, parse_date
from demandtracking.exceptions.errors import UnknownDocumentTypeError
from demandtracking.logic.util.recipient_parser import recipients_from_envelope

from .demand import Demand
from .demand_status import DemandStatus
from .document import Document
from .document_subject import is_other, subject_from_label
from .document_type import DocumentType
from .ids import DemandId, DocumentId
from .recipient import Recipient
from .rectification import Rectification
from .research_entry import ResearchEntry

logger = logging.getLogger(__name__)


def _pick(record: Mapping[str, Any], *keys: str, default: Any = None) -> Any:
    for key in keys:
        if key in record and record[key] is not None:
            return record[key]
    return default


def _text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, Mapping):
        # searchable fields arrive as {"id": .., "nome": ..}
        value = value.get("nome") or value.get("name") or ""
    return str(value).strip()


_TRUE_WORDS = {"1", "true", "yes", "on", "sim", "s"}


def _flag(value: Any, default: bool = False) -> bool:
    # hosts send JSON booleans, 0/1 or words ("false", "sim")
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value != 0
    text = str(value).strip().lower()
    if not text:
        return default
    return text in _TRUE_WORDS


def _date(value: Any, *, field: str, ref: Any):
    if is_blank(value):
        return None
    parsed = parse_date(value)
    if parsed is None:
        logger.warning("Ignoring unparseable %s=%r on record %r", field, value, ref)
    return parsed


def _ids(values: Optional[Iterable[Any]]) -> List[DocumentId]:
    result: List[DocumentId] = []
    for value in values or ():
        try:
            result.append(DocumentId(int(value)))
        except (TypeError, ValueError):
            logger.warning("Ignoring non-numeric document reference %r", value)
    return result


def _tracking(record: Mapping[str, Any], ref: Any) -> tuple[str, bool]:
    code = _text(_pick(record, "tracking_code", "codigoRastreio"))
    no_tracking = _flag(_pick(record, "no_tracking", "naopossuiRastreio"))
    if no_tracking and code:
        logger.warning("Dropping tracking code %r flagged as untracked on %r", code, ref)
        code = ""
    return code, no_tracking


def recipient_from_record(record: Mapping[str, Any]) -> Recipient:
    name = _text(_pick(record, "name", "nome"))
    code, no_tracking = _tracking(record, name)
    return Recipient(
        name=name,
        dispatched_on=_date(_pick(record, "dispatched_on", "dataEnvio"), field="dispatched_on", ref=name),
        answered_on=_date(_pick(record, "answered_on", "dataResposta"), field="answered_on", ref=name),
        tracking_code=code,
        no_tracking=no_tracking,
    )


def rectification_from_record(record: Mapping[str, Any]) -> Rectification:
    return Rectification(
        authority=_text(_pick(record, "authority", "autoridade")),
        court=_text(_pick(record, "court", "orgaoJudicial")),
        signed_on=_date(_pick(record, "signed_on", "dataAssinatura"), field="signed_on", ref=record.get("id")),
    )


def research_from_record(record: Mapping[str, Any]) -> ResearchEntry:
    return ResearchEntry(
        kind=_text(_pick(record, "kind", "tipo")),
        identifier=_text(_pick(record, "identifier", "identificador")),
        note=_text(_pick(record, "note", "complementar")),
    )


def document_from_record(record: Mapping[str, Any]) -> Document:
    """
    Build a Document from a host record.

    Circular letters without individual recipient data but with several
    names in the addressee string get one Recipient per name, each
    inheriting the shared envelope.
    """
    doc_id = DocumentId(int(_pick(record, "id")))
    raw_type = _pick(record, "doc_type", "tipoDocumento")
    doc_type = raw_type if isinstance(raw_type, DocumentType) else DocumentType.from_label(raw_type)
    if doc_type is None:
        raise UnknownDocumentTypeError(f"Document {doc_id}: unknown type {raw_type!r}")

    raw_subject = _text(_pick(record, "subject", "assunto"))
    subject = subject_from_label(doc_type, raw_subject)
    subject_other = _text(_pick(record, "subject_other", "assuntoOutros"))
    if subject is None and raw_subject:
        logger.debug("Document %s: unrecognised subject %r for %s", doc_id, raw_subject, doc_type.value)
        subject_other = subject_other or raw_subject
    elif subject is not None and not is_other(subject):
        subject_other = ""

    dispatched_on = _date(_pick(record, "dispatched_on", "dataEnvio"), field="dispatched_on", ref=doc_id)
    answered_on = _date(_pick(record, "answered_on", "dataResposta"), field="answered_on", ref=doc_id)
    code, no_tracking = _tracking(record, doc_id)
    recipient_text = _text(_pick(record, "recipient", "destinatario"))

    recipients = [recipient_from_record(r) for r in _pick(record, "recipients", "destinatariosData", default=[])]
    if not recipients and doc_type == DocumentType.CIRCULAR_LETTER:
        recipients = recipients_from_envelope(
            recipient_text,
            dispatched_on=dispatched_on,
            answered_on=answered_on,
            tracking_code=code,
            no_tracking=no_tracking,
        )

    responded_default = answered_on is not None
    return Document(
        id=doc_id,
        demand_id=DemandId(int(_pick(record, "demand_id", "demandaId"))),
        doc_type=doc_type,
        subject=subject,
        subject_other=subject_other,
        number=_text(_pick(record, "number", "numeroDocumento")),
        year=_text(_pick(record, "year", "anoDocumento")),
        recipient=recipient_text,
        dispatched_on=dispatched_on,
        answered_on=answered_on,
        tracking_code=code,
        no_tracking=no_tracking,
        responded=_flag(_pick(record, "responded", "respondido"), default=responded_default),
        recipients=recipients,
        media_hash=_text(_pick(record, "media_hash", "hashMidia")),
        media_size=_text(_pick(record, "media_size", "tamanhoMidia")),
        media_password=_text(_pick(record, "media_password", "senhaMidia")),
        defective=_flag(_pick(record, "defective", "apresentouDefeito")),
        authority=_text(_pick(record, "authority", "autoridade")),
        court=_text(_pick(record, "court", "orgaoJudicial")),
        signed_on=_date(_pick(record, "signed_on", "dataAssinatura"), field="signed_on", ref=doc_id),
        rectifications=[rectification_from_record(r) for r in _pick(record, "rectifications", "retificacoes", default=[])],
        finalized_on=_date(_pick(record, "finalized_on", "dataFinalizacao"), field="finalized_on", ref=doc_id),
        research=[research_from_record(r) for r in _pick(record, "research", "pesquisas", default=[])],
        selected_media=_ids(_pick(record, "selected_media", "selectedMidias")),
        selected_technical_reports=_ids(_pick(record, "selected_technical_reports", "selectedRelatoriosTecnicos")),
        selected_intelligence_reports=_ids(
            _pick(record, "selected_intelligence_reports", "selectedRelatoriosInteligencia")
        ),
        selected_records=_ids(_pick(record, "selected_records", "selectedAutosCircunstanciados")),
        selected_notices=_ids(_pick(record, "selected_notices", "selectedDecisoes")),
    )


def demand_from_record(record: Mapping[str, Any]) -> Demand:
    demand_id = DemandId(int(_pick(record, "id")))
    raw_status = _pick(record, "status")
    status = raw_status if isinstance(raw_status, DemandStatus) else DemandStatus.from_label(raw_status)
    return Demand(
        id=demand_id,
        sged=_text(_pick(record, "sged")),
        demand_type=_text(_pick(record, "demand_type", "tipoDemanda")),
        administrative_case=_text(_pick(record, "administrative_case", "autosAdministrativos")),
        judicial_case=_text(_pick(record, "judicial_case", "autosJudiciais")),
        extrajudicial_case=_text(_pick(record, "extrajudicial_case", "autosExtrajudiciais")),
        pic=_text(_pick(record, "pic")),
        requesting_authority=_text(_pick(record, "requesting_authority", "orgao")),
        analyst=_text(_pick(record, "analyst", "analista")),
        description=_text(_pick(record, "description", "descricao")),
        opened_on=_date(_pick(record, "opened_on", "dataInicial"), field="opened_on", ref=demand_id),
        closed_on=_date(_pick(record, "closed_on", "dataFinal"), field="closed_on", ref=demand_id),
        reopened_on=_date(_pick(record, "reopened_on", "dataReabertura"), field="reopened_on", ref=demand_id),
        new_closed_on=_date(_pick(record, "new_closed_on", "novaDataFinal"), field="new_closed_on", ref=demand_id),
        status=status,
    )


def documents_from_records(
    records: Iterable[Mapping[str, Any]],
    *,
    on_error: Optional[Callable[[Mapping[str, Any], Exception], None]] = None,
) -> List[Document]:
    """
    Map many records. Without *on_error* the first failure propagates;
    with it, failing records are reported and skipped.
    """
    documents: List[Document] = []
    for record in records:
        try:
            documents.append(document_from_record(record))
        except (UnknownDocumentTypeError, ValueError, TypeError) as exc:
            if on_error is None:
                raise
            on_error(record, exc)
    return documents

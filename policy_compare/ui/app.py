"""Browser UI. Run with ``streamlit run policy_compare/ui/app.py``."""

from collections.abc import Callable

import streamlit as st

from policy_compare.comparison.factory import RequesterFactory
from policy_compare.comparison.models import ComparisonResult
from policy_compare.comparison.requester import ComparisonRequester
from policy_compare.config.settings import Settings
from policy_compare.documents.models import UploadedDocument
from policy_compare.export.chart import build_premium_chart
from policy_compare.export.excel_export import build_workbook
from policy_compare.export.pdf_report import build_pdf_report
from policy_compare.export.rows import comparison_table
from policy_compare.logging.logger import Log
from policy_compare.session import ComparisonSession

ACCEPTED_TYPES = ["pdf", "xls", "xlsx", "csv", "png", "jpg", "jpeg", "webp"]
EXPORTS: list[tuple[str, Callable[[ComparisonResult], bytes], str, str]] = [
    ("PDF İndir", build_pdf_report, "sigorta-karsilastirma.pdf", "application/pdf"),
    (
        "Excel İndir",
        build_workbook,
        "sigorta-karsilastirma.xlsx",
        "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    ),
]


@st.cache_resource
def get_settings() -> Settings:
    settings = Settings()
    Log.configure(settings.log_level)
    return settings


@st.cache_resource
def get_requester() -> ComparisonRequester:
    return RequesterFactory.create(get_settings())


def get_session() -> ComparisonSession:
    if "session" not in st.session_state:
        st.session_state["session"] = ComparisonSession(get_settings())
        st.session_state["uploader_key"] = 0
    return st.session_state["session"]


def render_upload(session: ComparisonSession) -> None:
    uploads = st.file_uploader(
        f"Teklifleri Buraya Bırakın (PDF veya Excel, maksimum {session.max_files} dosya)",
        type=ACCEPTED_TYPES,
        accept_multiple_files=True,
        disabled=session.is_full or session.loading,
        key=f"uploader_{st.session_state['uploader_key']}",
    )
    if uploads:
        session.add_documents(UploadedDocument.from_upload(upload) for upload in uploads)
        st.session_state["uploader_key"] += 1
        st.rerun()

    columns = st.columns(2)
    for index, document in enumerate(session.files):
        with columns[index % 2].container(border=True):
            name_col, remove_col = st.columns([5, 1])
            name_col.markdown(f"**{document.name}**  \n{document.size_bytes / 1024:.2f} KB")
            remove_col.button(
                "✕",
                key=f"remove_{document.token}",
                on_click=session.remove,
                args=(document.token,),
            )

    if session.error:
        st.error(session.error)

    if st.button(
        "Karşılaştır →",
        type="primary",
        disabled=session.loading or not session.files,
    ):
        try:
            requester = get_requester()
        except ValueError as exc:
            Log.error(f"Comparison provider misconfigured: {exc}")
            session.error = str(exc)
        else:
            with st.spinner("Analiz Ediliyor..."):
                session.compare(requester)
        st.rerun()


def render_result(session: ComparisonSession, result: ComparisonResult) -> None:
    title_col, reset_col = st.columns([4, 1])
    title_col.subheader("Analiz Sonuçları")
    reset_col.button("Yeni Karşılaştırma", on_click=session.reset)

    summary_col, actions_col = st.columns([4, 1])
    summary_col.info(f"**Yapay Zeka Özeti**\n\n{result.summary}")
    for label, build, file_name, mime in EXPORTS:
        try:
            data = build(result)
        except Exception as exc:
            Log.error(f"Export failed: {exc}", file=file_name)
            actions_col.error(f"{file_name} oluşturulamadı.")
            continue
        actions_col.download_button(
            label,
            data=data,
            file_name=file_name,
            mime=mime,
            use_container_width=True,
        )

    st.plotly_chart(build_premium_chart(result), use_container_width=True)
    st.table(comparison_table(result))


def main() -> None:
    st.set_page_config(page_title="Sigorta Teklif Karşılaştırma", layout="wide")
    session = get_session()

    st.title("Sigorta Tekliflerini Saniyeler İçinde Karşılaştırın")
    if session.result is None:
        st.write(
            "Kasko, Trafik veya Sağlık sigortası tekliflerinizi (PDF veya Excel) yükleyin. "
            "Yapay zeka sizin için teminatları, limitleri ve fiyatları analiz etsin."
        )
        render_upload(session)
    else:
        render_result(session, session.result)

    st.caption(
        "Bu araç bilgilendirme amaçlıdır. "
        "Kesin poliçe onayı için lütfen sigorta şirketiyle görüşün."
    )


main()

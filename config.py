"""Configuration constants for the shipping agency billing tool."""

from typing import Dict, List, Tuple

from models import BillingInstruction

# ============================================================================
# INPUT SPREADSHEET SETTINGS
# ============================================================================

COL_SHIPPER: str = "Name of shipper"
COL_QTY_BL: str = "Qtd per BL"
COL_BL_NBR: str = "BL nbr"
COL_QTY_DUE: str = "Qtd per DU-E"
COL_CNPJ: str = "CNPJ/VAT"
COL_DUE: str = "DU-E"
COL_BROKER: str = "Customs broker"

# Column order assumed when the pasted block has no header row
FALLBACK_COLUMN_ORDER: List[str] = [
    COL_SHIPPER,
    COL_QTY_BL,
    COL_BL_NBR,
    COL_QTY_DUE,
    COL_CNPJ,
    COL_DUE,
    COL_BROKER,
]

RECOGNIZED_COLUMNS: frozenset = frozenset(FALLBACK_COLUMN_ORDER)

# Header synonyms normalized before matching (exact, case-sensitive)
HEADER_SYNONYMS: Dict[str, str] = {
    "DUE": COL_DUE,
    "Qtd per DUE": COL_QTY_DUE,
}

# A first line is a header when at least this many cells are known column names
MIN_HEADER_MATCHES: int = 3

# Columns each feature needs once a header row was detected
BILLING_REQUIRED_COLUMNS: List[str] = [COL_SHIPPER, COL_BL_NBR, COL_CNPJ, COL_BROKER]
GRAIN_REQUIRED_COLUMNS: List[str] = [COL_SHIPPER, COL_BL_NBR, COL_QTY_BL]
SUGAR_REQUIRED_COLUMNS: List[str] = [COL_SHIPPER, COL_BL_NBR, COL_QTY_BL, COL_BROKER]

# ============================================================================
# BILLING REPORT SETTINGS
# ============================================================================

# Fixed BL fee charged per BL (BRL)
UNIT_PRICE: float = 300.0
CURRENCY_PREFIX: str = "R$"

# Marker inside BillingInstruction.special_note that flags the row in red
HIGHLIGHT_MARKER: str = "VERMELHO"

SHEET_BILLABLE: str = "Faturamento"
SHEET_SKIPPED: str = "Não Faturar"

OUTPUT_COLUMNS: List[str] = [
    "BL nbr",
    "Name of shipper",
    "CNPJ/VAT",
    "Qtd BLs",
    "Valor unitário",
    "Valor total",
    "Customs Broker",
    "Contato",
]

# Excel column widths, same order as OUTPUT_COLUMNS
OUTPUT_COLUMN_WIDTHS: List[int] = [20, 35, 20, 10, 15, 15, 25, 20]

# ============================================================================
# BILLING INSTRUCTIONS
# ============================================================================

RAX_CNPJ: str = "17.343.028/0001-24"
RAX_NAME: str = "RAX BRASIL ASSESSORIA EM COMERCIO EXTERIOR LTDA"
RAX_EMAIL: str = "exportacao.granel@raxbrasil.com.br"
JRD_CNPJ: str = "19.562.559/0001-33"
JRD_NAME: str = "JRD ASSESSORIA ADUANEIRA E TRANSPORTES LTDA"
RED_NOTE: str = "⚠️ DESTACAR EM VERMELHO"

# Order matters: the first matching rule wins
BILLING_INSTRUCTIONS: List[BillingInstruction] = [
    BillingInstruction(
        shipper="CZARNIKOW",
        email="financeiro@czarnikow.com",
        remarks="Exportador paga somente 1 taxa de BL. Enviar cobrança direto para eles e não para os despachantes.",
        single_bl_fee=True,
    ),
    BillingInstruction(
        shipper="DELTA SUCROENERGIA S.A",
        aliases=("DELTA SUCROENERGIA", "DELTA"),
        remarks="Centralizar TODAS AS COBRANÇAS DA DELTA NO CNPJ: 13.537.735/0003-62",
        override_cnpj="13.537.735/0003-62",
    ),
    BillingInstruction(
        shipper="NUTRADE COMERCIAL EXPORTADORA LTDA",
        aliases=("NUTRADE",),
        email=RAX_EMAIL,
        remarks=f"Faturar {RAX_NAME} - {RAX_CNPJ}",
        override_cnpj=RAX_CNPJ,
        override_company_name=RAX_NAME,
    ),
    BillingInstruction(
        shipper="RAIZEN ENERGIA",
        aliases=("RAIZEN ARARAQUARA", "RAIZEN PARAGUAÇU LTDA", "RAIZEN CENTRO SUL", "RAIZEN CENTRO SUL PAULISTA"),
        email=RAX_EMAIL,
        remarks=f"Faturar sempre para {RAX_NAME} - {RAX_CNPJ}",
        override_cnpj=RAX_CNPJ,
        override_company_name=RAX_NAME,
    ),
    BillingInstruction(
        shipper="RAIZEN CAARAPO ACUCAR E ALCOOL LTDA",
        aliases=("RAIZEN CAARAPO",),
        email=RAX_EMAIL,
        remarks=f"Faturar sempre para {RAX_NAME} - {RAX_CNPJ}",
        override_cnpj=RAX_CNPJ,
        override_company_name=RAX_NAME,
    ),
    BillingInstruction(
        shipper="SUCDEN",
        email="nfserv@sucden.com.br",
        additional_emails=("rtalarini@sucden.com", "exeraw.br@sucden.com", "exelog@sucden.com"),
        remarks="Copiar Rose e execução: Rosemeire Talarini <rtalarini@sucden.com.br>",
    ),
    BillingInstruction(
        shipper="USINA CONQUISTA DO PONTAL",
        aliases=("USINA CONQUISTA DO PONTAL (ATVOS)", "ATVOS", "USINA ELDORADO"),
        email=RAX_EMAIL,
        remarks=f"Faturar {RAX_NAME} - {RAX_CNPJ}",
        override_cnpj=RAX_CNPJ,
        override_company_name=RAX_NAME,
    ),
    BillingInstruction(
        shipper="USINA ELDORADO",
        email=RAX_EMAIL,
        remarks=f"Faturar {RAX_NAME} - {RAX_CNPJ}",
        override_cnpj=RAX_CNPJ,
        override_company_name=RAX_NAME,
    ),
    BillingInstruction(
        shipper="USINAS ITAJOBI",
        aliases=("ITAJOBI",),
        remarks=f"Faturar sempre para {JRD_NAME} - {JRD_CNPJ}",
        override_cnpj=JRD_CNPJ,
        override_company_name=JRD_NAME,
    ),
    BillingInstruction(
        shipper="COFCO",
        remarks=f"Faturar {JRD_NAME} - {JRD_CNPJ}",
        override_cnpj=JRD_CNPJ,
        override_company_name=JRD_NAME,
    ),
    BillingInstruction(
        shipper="CLEALCO",
        remarks=f"Faturar {JRD_NAME} - {JRD_CNPJ}",
        override_cnpj=JRD_CNPJ,
        override_company_name=JRD_NAME,
    ),
    BillingInstruction(
        shipper="COLOMBO",
        remarks="NÃO FAZ MAIS PELO CNPJ DA JRD",
    ),
    BillingInstruction(
        shipper="ENGELHART",
        remarks="NÃO FATURAR!",
        skip_billing=True,
    ),
    BillingInstruction(
        shipper="TEREOS ACUCAR E ENERGIA BRASIL S.A.",
        aliases=("TEREOS", "TEREOS ACUCAR E ENERGIA BRASIL"),
        remarks="PERGUNTAR SEMPRE O CNPJ QUE DEVERÁ SER UTILIZADO PARA A JRD",
        special_note="Verificar CNPJ com JRD",
    ),
    BillingInstruction(
        shipper="BOM SUCESSO",
        remarks="AO ENVIAR POR E-MAIL AO ACCOUNT SEMPRE DEIXAR A COR EM VERMELHO PARA QUE ELES LEMBREM DE PREENCHER O FORMULARIO SOLICITADO.",
        special_note=RED_NOTE,
    ),
    BillingInstruction(
        shipper="CERRADINHO",
        remarks="AO ENVIAR POR E-MAIL AO ACCOUNT SEMPRE DEIXAR A COR EM VERMELHO. DEAG - Enviar cobrança direto para eles e não para os despachantes.",
        special_note=RED_NOTE,
    ),
    BillingInstruction(
        shipper="CANAPOLIS",
        aliases=("VALE DO TIJUCO", "VALE DO PONTAL"),
        email="bruno.scanavini@cmaa.ind.br",
        remarks="DEAG - Enviar cobrança direto para eles e não para os despachantes.",
        special_note=RED_NOTE,
    ),
    BillingInstruction(
        shipper="BRANCO PERES AGRO S/A",
        aliases=("BRANCO PERES",),
        additional_emails=("angelobozzo@brancoperes.com.br", "leonardofernandes@brancoperes.com.br"),
        remarks="Adicionar emails do financeiro da Branco Peres na mensagem",
    ),
    BillingInstruction(
        shipper="USINA AÇUCAREIRA SANTA TEREZINHA",
        aliases=("SANTA TEREZINHA", "USINA SANTA TEREZINHA"),
        remarks="NÃO FATURAR, ESTE EXPORTADOR NÃO PAGA BL FEE.",
        skip_billing=True,
    ),
    BillingInstruction(
        shipper="REVATI SA",
        aliases=("REVATI",),
        remarks=f"Faturar sempre para {JRD_NAME} - {JRD_CNPJ}",
        override_cnpj=JRD_CNPJ,
        override_company_name=JRD_NAME,
    ),
    BillingInstruction(
        shipper="BTG PACTUAL COMMODITIES SERTRADING S.A.",
        aliases=("BTG PACTUAL", "BTG", "SERTRADING"),
        remarks="NÃO FATURAR, ESTE EXPORTADOR NÃO PAGA BL FEE. (04.626.426/0001-06)",
        skip_billing=True,
    ),
]

# ============================================================================
# CUSTOMS BROKER (DESPACHANTE) EMAILS
# ============================================================================

_BUNGE = "bbr.execution.santos@bunge.com; bbr.execution.agri@bunge.com; bga.execution.sam@bunge.com; bbr.execution.support@bunge.com"
_ALP = "allan@alplog.com.br; junior@alplog.com.br; exec@alplog.com.br"
_AFR = "export@afrservicos.com.br; caroline.couto@afrservicos.com.br"
_FLIPPER = "sugar@grupoflipper.com.br; exportacao1@grupoflipper.com.br; exportacao@grupoflipper.com.br"
_JRD = "thayse.gomes@jrdcomex.com.br; joseroberto@jrdcomex.com.br; granel@jrdcomex.com.br"
_LOTUS = "tavyny@lotusaduaneira.com.br; wagner@lotusaduaneira.com.br; tiago@lotusaduaneira.com.br"
_LDC = "spo-ldcbra-aduana@ldc.com; BZL-BULKSHIPMENTS@ldc.com"
_RIBEIRO = "andre@sribeiroassessoria.com.br"
_SUCDEN = "rtalarini@sucden.com; exeraw@sucden.com"
_SUNRISE = "exec.granel@sunriseonline.com.br; export@copersucar.com.br"
_TGRAO = "assist.despacho@tgrao.com.br"

# Ordered (key, emails) pairs: substring and token fallbacks take the first hit
BROKER_EMAILS: List[Tuple[str, str]] = [
    ("ABENI", "exportacao@abenigroup.com; lbechelli@abenigroup.com"),
    ("ADM", "ststa@adm.com"),
    ("AFR SERVIÇOS", _AFR),
    ("AFR SERVICOS", _AFR),
    ("ALP LOGISTICA ADUANEIRA LTDA", _ALP),
    ("ALP LOGISTICA", _ALP),
    ("ALP", _ALP),
    ("ANTONIO SERGIO", "export@antosergio.com.br"),
    ("AUXILIAR", "exportacao@auxiliarsantos.com.br; victor@auxiliarsantos.com.br"),
    ("BUNGE STS", _BUNGE),
    ("FERTIMPORT", _BUNGE),
    ("BUNGE", _BUNGE),
    ("CARAMURU", "despachosts@caramuru.com"),
    ("CARGILL", "desemb-gosc@Cargill.com; docs-gosc@Cargill.com"),
    ("CARMOS", "exportacao.sts@carmos.com.br"),
    ("COOPERSUCAR", "tnoliveira@copersucar.com.br; CCOProgramacao@copersucar.com.br; Pfborba@copersucar.com.br; te.documents.brazil@alvean.com; Leandro.Alvares@alvean.com"),
    ("CROMOSERV", "sugar@cromoserv.com; daniela.freitas@cromoserv.com"),
    ("CUTRALE", "gabriela.somenci@cutrale.com.br; Allan@cutrale.com.br; execution@cutraletrading.com"),
    ("DEAG", "execution@deag.com.br"),
    ("FLIPPER", _FLIPPER),
    ("GRUPO FLIPPER", _FLIPPER),
    ("ITAMARATY", "despacho@itamaratylogistica.com.br"),
    ("JRD COMEX", _JRD),
    ("JRD", _JRD),
    ("LOTUS DESPACHOS", _LOTUS),
    ("LOTUS", _LOTUS),
    ("LOUIS DREYFUS", _LDC),
    ("LDC", _LDC),
    ("LPC", "ie.maritimo@lpc.com.br"),
    ("MARELLE", "despachos@marelleservicos.com.br"),
    ("MULTIMODAL", "dener.multimodal@mmodal.com.br; export.multimodal@mmodal.com.br"),
    ("NIHIL", "rtalarini@sucden.com.br; exeraw.br@sucden.com; exelog@sucden.com.br"),
    ("NOSSO PORTO", "nossoporto@nossoporto.com.br; documentos@nossoporto.com.br; financeiro@nossoport.com.br"),
    ("PIBERNAT", "rafael.lopes@pibernat.com.br; katia.costa@pibernat.com.br; john.lima@pibernat.com.br"),
    ("PORTO", "op@portoaduaneira.com.br"),
    ("RAX", RAX_EMAIL),
    ("RBS", "granel.docs@rbslogistics.com.br"),
    ("S & RIBEIRO SERVICOS", _RIBEIRO),
    ("S & RIBEIRO", _RIBEIRO),
    ("RIBEIRO", _RIBEIRO),
    ("SENIOR", "senior@senior-comex.com.br; gabriel.silva@senior-comex.com.br"),
    ("SUCDEN DO BRASIL", _SUCDEN),
    ("SUCDEN", _SUCDEN),
    ("SUNRISE SERVICOS ADUANEIROS LTDA", _SUNRISE),
    ("SUNRISE", _SUNRISE),
    ("T-GRAO", _TGRAO),
    ("TGRAO", _TGRAO),
    ("WNIG", "werter@wnig.com.br; export@wnig.com.br"),
    ("INDAIA", "atendimentocargill@myindaia.com.br; wagner.teixeira@myindaia.com.br"),
]

# ============================================================================
# BL DOCUMENT & RECEIPT SETTINGS
# ============================================================================

DEFAULT_PORT_OF_LOADING: str = "SANTOS"

# Declared BL value in USD per metric ton of gross weight
BL_VALUE_PER_MT: float = 30.0

GRAIN_CARGO_TYPES: Tuple[str, ...] = ("SBS", "SBM", "CORN")
SUGAR_CARGO: str = "SUGAR"

# Placeholder used when the manifest does not show the field
NOT_IDENTIFIED: str = "Não identificado"

RECEIPT_ISSUER: str = "ROCHAMAR AGÊNCIA MARÍTIMA S.A."

# ============================================================================
# DEBUG FLAGS
# ============================================================================

# Enable debug logging and output
FLAG_DEBUG: bool = False

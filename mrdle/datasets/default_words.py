"""
Built-in word list, used when no word file is given.

The words are stored as one blob with no separators: every
DEFAULT_WORD_SIZE characters is one word. WordStore.default() slices it.
"""

DEFAULT_WORD_SIZE = 5

DEFAULT_WORDS_BLOB = (
    "aboutaboveabuseactoracuteadoptadultafteragainagentagreeaheadalarmalbum"
    "alertalikealiveallowalonealongalteramongangerangleangryapartappleapply"
    "arenaarguearisearrayasideassetaudioauditavoidawardawarebadlybakerbasic"
    "basisbeachbeganbeginbeingbelowbenchbirthblackbladeblameblindblockblood"
    "boardboostboothboundbrainbrandbreadbreakbreedbriefbringbroadbrokebrown"
    "buildbuiltbuyercabincablecarrycatchcausechainchairchartchasecheapcheck"
    "chestchiefchildchinachoircivilclaimclasscleanclearclimbclockclosecoach"
    "coastcouldcountcourtcovercraftcranecrashcreamcrimecrosscrowdcrowncurve"
    "cycledailydancedateddealtdeathdebutdelaydepthdoingdoubtdozendraftdrama"
    "drawndreamdressdrinkdriveeagerearlyeartheighteliteemptyenemyenjoyenter"
    "entryequalerroreventeveryexactexistextrafaithfalsefaultfiberfieldfifth"
    "fiftyfightfinalfirstfixedflashfleetfloorfluidfocusforceforthfortyforum"
    "foundframefrankfraudfreshfrontfruitfullyfunnygiantgivenglassglobegoing"
    "gracegradegrandgrantgrassgreatgreengrossgroupgrownguardguessguestguide"
    "happyheartheavyhencehorsehotelhousehumanidealimageindexinnerinputissue"
    "jointjudgeknownlabellargelaserlaterlaughlayerlearnleaseleastleavelegal"
    "levellightlimitlocallogiclooselowerluckylunchmajormakermarchmatchmaybe"
    "mayormeantmediametalmightminormodelmoneymonthmoralmotormountmousemouth"
    "moviemusicneedsnevernewlynightnoisenorthnovelnurseoccuroceanofferoften"
    "orderotheroughtpaintpanelpaperpartypeacephasephonephotopiecepilotpitch"
    "placeplainplaneplantplatepointpoundpowerpresspriceprideprimeprintprior"
    "prizeproofproudprovequeenquickquietquiteradioraiserangerapidratioreach"
    "readyrebusreferrightrivalriverrobinroundrouteroyalrulesruralscalescene"
    "scopescoresenseservesevenshallshapesharesharpsheetshelfshellshiftshirt"
    "shockshootshortshownsightsincesixthsixtyskillsleepslidesmallsmartsmile"
    "smithsmokesolidsolvesorrysoundsouthspacesparespeakspeedspendspentsplit"
    "spokesportstaffstagestakestandstartstatesteamsteelstickstillstockstone"
    "stoodstorestormstorystripstuckstudystuffstylesugarsuitesupersweettable"
    "takentastetaxesteachteeththankthefttheirthemetherethesethickthingthink"
    "thirdthosethreethrewthrowtighttimestiredtitletodaytopictotaltouchtough"
    "towertracktradetraintreattrendtrialtriedtriestrucktrulytrusttruthtwice"
    "underundueunionunityuntilupperupseturbanusageusualvalidvaluevideovirus"
    "visitvitalvoicewastewatchwaterwheelwherewhichwhilewhitewholewhosewoman"
    "womenworldworryworseworstworthwouldwoundwritewrongwroteyieldyoungyouth"
)
